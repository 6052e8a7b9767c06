from src.map_viewer.cli import main

main()
