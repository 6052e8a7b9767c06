#!/usr/bin/env python
# pylint: disable=unused-argument
# This program is dedicated to the public domain under the CC0 license.

"""
Telegram Bot for indoor room navigation.

Users register where they are by sending the id of the NFC tag next to
the door (/tag), then send a room number and get back the route and a
map with the route drawn over the floor plan.
"""

import io
import logging
import os
import sys
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from dotenv import load_dotenv
from telegram import Update
from telegram.error import NetworkError
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from src.logging_config import setup_logging
from src.map_viewer.projection import ProjectionSettings
from src.map_viewer.viewer import create_figure, figure_to_html
from src.navigation.loader import FloorData, load_default_floor, load_floor
from src.navigation.router import ROUTING_MODES, route_distance

# Initialize logging (safe to call multiple times)
setup_logging()

logger = logging.getLogger(__name__)

# Configuration constants
DEFAULT_ROUTING_MODE = "hops"
FLOOR_KEY = "floor"
ROUTING_KEY = "routing"
START_ROOM_KEY = "start_room"


def _get_floor(context: ContextTypes.DEFAULT_TYPE) -> FloorData:
    """Return the floor loaded at startup, falling back to the built-in one."""
    floor = context.bot_data.get(FLOOR_KEY)
    if floor is None:
        floor = load_default_floor()
        context.bot_data[FLOOR_KEY] = floor
    return floor


def _routing_mode(value: Optional[str]) -> str:
    """Validate a routing mode name, defaulting to fewest hops."""
    if not value:
        return DEFAULT_ROUTING_MODE
    if value not in ROUTING_MODES:
        logger.warning(f"Unknown routing mode {value!r}, using {DEFAULT_ROUTING_MODE!r}")
        return DEFAULT_ROUTING_MODE
    return value


def format_route(route: list[str], distance: float) -> str:
    """
    Build the user-facing route description.

    Example:
        >>> format_route(["207", "k-207", "k-206", "206"], 3.0)
        'Route 207 -> 206 (3 steps, distance 3.0):\\n207 -> k-207 -> k-206 -> 206'
    """
    return (
        f"Route {route[0]} -> {route[-1]} ({len(route) - 1} steps, distance {distance:.1f}):\n"
        + " -> ".join(route)
    )


# Define a few command handlers. These usually take the two arguments update and
# context.
async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send a message when the command /start is issued."""
    user = update.effective_user
    if not update.message or not user:
        return
    await update.message.reply_html(
        rf"Hi {user.mention_html()}! Scan the tag at your door with /tag, "
        r"then send me the room you want to go to."
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send a message when the command /help is issued."""
    if not update.message:
        return

    await update.message.reply_text(
        "Indoor Navigation Bot\n\n"
        "Where am I:\n"
        "/tag <id> - Register the NFC tag next to you\n"
        "/from <room> - Set your current room manually\n\n"
        "Where to:\n"
        "Send a room number (e.g. 215) to get the route\n"
        "/rooms - List all rooms\n\n"
        "Other:\n"
        "/start - Start the bot\n"
        "/help - Show this help message"
    )


async def tag_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Resolve a scanned tag id to the user's current room."""
    if not update.message:
        return

    if not context.args:
        await update.message.reply_text("Usage: /tag <tag id>")
        return

    tag_id = context.args[0]
    room = _get_floor(context).tags.on_tag_read(tag_id)
    if room is None:
        context.user_data.pop(START_ROOM_KEY, None)
        await update.message.reply_text(f"Unrecognized tag: {tag_id}")
        return

    context.user_data[START_ROOM_KEY] = room
    logger.info(f"User at room {room} (tag {tag_id})")
    await update.message.reply_text(f"You are at room {room}. Where do you want to go?")


async def from_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Set the current room without a tag."""
    if not update.message:
        return

    if not context.args:
        await update.message.reply_text("Usage: /from <room>")
        return

    room = context.args[0]
    if room not in _get_floor(context).store:
        await update.message.reply_text(f"Unknown room: {room}. Use /rooms to list rooms.")
        return

    context.user_data[START_ROOM_KEY] = room
    await update.message.reply_text(f"You are at room {room}. Where do you want to go?")


async def rooms_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """List every room in the navigation graph."""
    if not update.message:
        return
    rooms = _get_floor(context).store.rooms()
    await update.message.reply_text("Rooms:\n" + ", ".join(rooms))


async def destination(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Treat a plain text message as the destination and reply with the route."""
    if not update.message or not update.message.text:
        return

    start_room = context.user_data.get(START_ROOM_KEY)
    if start_room is None:
        await update.message.reply_text("I don't know where you are yet. Send /tag <id> first.")
        return

    end_room = update.message.text.strip()
    floor = _get_floor(context)
    mode = _routing_mode(context.bot_data.get(ROUTING_KEY))

    logger.info(f"Route requested: {start_room} -> {end_room} ({mode})")
    route = ROUTING_MODES[mode](floor.store, start_room, end_room)

    if route is None:
        logger.info(f"No route from {start_room} to {end_room}")
        await update.message.reply_text(f"No route from {start_room} to {end_room}.")
        return

    distance = route_distance(floor.store, route)
    await update.message.reply_text(format_route(route, distance))

    fig = create_figure(
        route,
        floor.store,
        settings=ProjectionSettings.from_dict(floor.projection),
        title=f"Route {start_room} → {end_room}",
    )
    html = figure_to_html(fig).encode("utf-8")
    await update.message.reply_document(
        document=io.BytesIO(html),
        filename=f"route_{start_room}_{end_room}.html",
    )


async def unknown_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Inform the user that the command was not found."""
    if not update.message:
        return
    await update.message.reply_text(
        "Sorry, I didn't understand that command.\n\n"
        "Available commands:\n"
        "/start - Start the bot\n"
        "/help - Get help\n"
        "/tag - Register your location\n"
        "/rooms - List rooms"
    )


async def post_init(application: Application) -> None:
    """Load floor data and routing mode once on startup."""
    data_path = os.getenv("NAV_FLOOR_DATA")
    if data_path:
        logger.info(f"Loading floor data from {data_path}")
        floor = load_floor(data_path)
    else:
        floor = load_default_floor()

    application.bot_data[FLOOR_KEY] = floor
    application.bot_data[ROUTING_KEY] = _routing_mode(os.getenv("NAV_ROUTING"))
    logger.info(
        f"Floor ready: {len(floor.store)} nodes, routing by {application.bot_data[ROUTING_KEY]}"
    )


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle errors - log network errors concisely, others with full traceback."""
    if isinstance(context.error, NetworkError):
        logger.warning(f"Network error (will retry): {context.error}")
    else:
        logger.exception("Unhandled exception:", exc_info=context.error)


def main() -> None:
    """Start the bot."""
    load_dotenv()
    token = os.getenv("TELEGRAM_BOT_TOKEN")
    if not token:
        raise ValueError("TELEGRAM_BOT_TOKEN not found in environment variables")

    application = (
        Application.builder()
        .token(token)
        .post_init(post_init)  # Load floor data on startup
        .build()
    )

    # Location commands
    application.add_handler(CommandHandler("tag", tag_command))
    application.add_handler(CommandHandler("from", from_command))

    # Navigation
    application.add_handler(CommandHandler("rooms", rooms_command))
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, destination))

    # General commands
    application.add_handler(CommandHandler("start", start))
    application.add_handler(CommandHandler("help", help_command))

    # handle unknown commands
    application.add_handler(MessageHandler(filters.COMMAND, unknown_command))

    # Error handler for cleaner logging
    application.add_error_handler(error_handler)

    logger.info("Starting bot...")

    # Run the bot until the user presses Ctrl-C
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
