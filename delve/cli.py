"""
Delve CLI - Command-line interface for the engine.

Usage:
    delve play [--save PATH] [--new] [--seed N]   Play in the terminal
    delve show [--save PATH]                      Print the saved world
    delve serve [--host H] [--port P]             Run the HTTP API
    delve config                                  Show configuration
"""

import argparse
import logging
import sys

from .config import Config


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Delve - dig, collect and build on an endless grid",
        prog="delve",
    )
    parser.add_argument("--log-level", default=Config.LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--save", default=str(Config.SAVE_PATH), help="Save file path")
    play_parser.add_argument("--no-save", action="store_true", help="Do not load or save")
    play_parser.add_argument("--new", action="store_true", help="Discard the saved game first")
    play_parser.add_argument("--seed", type=int, default=Config.SEED, help="Seed for a new world")
    play_parser.add_argument("--width", type=int, default=Config.VIEW_WIDTH, help="View width")
    play_parser.add_argument("--height", type=int, default=Config.VIEW_HEIGHT, help="View height")

    # Show command
    show_parser = subparsers.add_parser("show", help="Print the saved world around the player")
    show_parser.add_argument("--save", default=str(Config.SAVE_PATH), help="Save file path")
    show_parser.add_argument("--width", type=int, default=Config.VIEW_WIDTH, help="View width")
    show_parser.add_argument("--height", type=int, default=Config.VIEW_HEIGHT, help="View height")

    # Config command
    subparsers.add_parser("config", help="Show configuration")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=Config.HOST, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=Config.PORT, help="Port")
    serve_parser.add_argument("--seed", type=int, default=None, help="Default seed for new sessions")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "show":
        cmd_show(args)
    elif args.command == "serve":
        cmd_serve(args)
    elif args.command == "config":
        cmd_config(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Play in the terminal."""
    from .persistence import SaveStore, SaveFileError
    from .platforms import ConsolePlatform
    from .session import start_game

    store = None
    if not args.no_save:
        store = SaveStore(args.save)
        if args.new and store.delete():
            print(f"Discarded saved game: {store.path}")

    platform = ConsolePlatform(store=store, width=args.width, height=args.height)
    try:
        turns = start_game(platform, seed=args.seed)
    except SaveFileError as e:
        print(f"Error: {e}")
        print("Use --new to start over.")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)

    print(f"Played {turns} turn(s).")
    if store is not None:
        print(f"Game saved to {store.path}")


def cmd_show(args):
    """Print the saved world."""
    from .persistence import SaveStore, SaveFileError
    from .platforms import render

    store = SaveStore(args.save)
    try:
        state = store.load()
    except SaveFileError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if state is None:
        print(f"No saved game at {store.path}")
        sys.exit(1)

    print(render(state, args.width, args.height))
    print(f"Seed: {state.seed}")
    print(f"Player: {state.player_pos} facing {state.player_dir.value}")
    print(f"Changed tiles: {len(state.world)}")
    if state.inventory.is_empty:
        print("Inventory: empty")
    else:
        print("Inventory:")
        for item, count in state.inventory.items():
            print(f"  - {item.display_name} x{count}")


def cmd_config(args):
    """Show configuration."""
    print(Config.display())


def cmd_serve(args):
    """Run the HTTP API."""
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed. Install with: pip install 'delve[api]'")
        sys.exit(1)

    from .api import APIService, create_app

    app = create_app(APIService(default_seed=args.seed))
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
