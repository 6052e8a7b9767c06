"""
Shared pytest fixtures for the indoor navigation tests.

This module provides reusable fixtures that are automatically discovered
by pytest. Fixtures here are available to all test files.

Educational notes for new developers:
- Fixtures are functions that provide test data or set up test state
- @pytest.fixture decorator marks a function as a fixture
- Fixtures can have different scopes: function (default), class, module, session
- Fixtures can depend on other fixtures (dependency injection)
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.navigation.graph_store import GraphStore, default_store
from src.navigation.loader import FloorData
from src.navigation.tags import default_tags


@pytest.fixture(scope="session")
def floor_store() -> GraphStore:
    """
    The built-in second floor graph.

    Session scoped: the store is immutable, so sharing it is safe.
    """
    return default_store()


@pytest.fixture
def small_store() -> GraphStore:
    """
    A small corridor with two routes from A to D.

        A --1-- B --10-- D            2 hops, distance 11
        A --1-- C --1--- E --1-- D    3 hops, distance 3

    Fewest hops goes through B; shortest distance goes through C and E.
    """
    return GraphStore.from_tables(
        {
            "A": [(1.0, "B"), (1.0, "C")],
            "B": [(1.0, "A"), (10.0, "D")],
            "C": [(1.0, "A"), (1.0, "E")],
            "E": [(1.0, "C"), (1.0, "D")],
            "D": [(10.0, "B"), (1.0, "E")],
        },
        {
            "A": (0, 0),
            "B": (10, 0),
            "C": (0, 10),
            "D": (20, 10),
            # E intentionally has no coordinates
        },
    )


@pytest.fixture
def sample_floor(floor_store) -> FloorData:
    """Built-in floor with the original app's projection."""
    return FloorData(
        store=floor_store,
        tags=default_tags(),
        projection={
            "offset_x": 720.0,
            "offset_y": 155.0,
            "scale_x": 0.73,
            "scale_y": 0.72,
            "color": "red",
            "stroke_width": 5.0,
        },
    )


@pytest.fixture
def mock_telegram_update():
    """
    Create a mock Telegram Update object.

    Returns a MagicMock that simulates an incoming Telegram update
    with user information and message capabilities.
    """
    update = MagicMock()
    update.effective_user.mention_html.return_value = "<b>TestUser</b>"
    update.effective_user.id = 12345
    update.message.reply_text = AsyncMock()
    update.message.reply_html = AsyncMock()
    update.message.reply_document = AsyncMock()
    update.message.text = "215"
    return update


@pytest.fixture
def mock_telegram_context(sample_floor):
    """
    Create a mock Telegram Context object.

    bot_data and user_data are real dicts so handlers can store state;
    args is empty until a test sets command arguments.
    """
    context = MagicMock()
    context.bot_data = {"floor": sample_floor, "routing": "hops"}
    context.user_data = {}
    context.args = []
    return context
