"""
Wordle - Main Entry Point

Starts either the interactive console game (default) or the HTTP game server.
"""

import argparse
import sys

from wordle_game.config import config, get_config
from wordle_game.models.errors import InvalidSolutionError
from wordle_game.services.dictionary import Dictionary
from wordle_game.utils.game_logger import initialize_game_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wordle in the terminal or over HTTP")
    parser.add_argument('mode', nargs='?', choices=['play', 'serve'], default='play',
                        help="play a console game (default) or start the HTTP server")
    parser.add_argument('--config', choices=sorted(config), default=None,
                        help="configuration profile (defaults to APP_ENV, then 'default')")
    parser.add_argument('--words',
                        help="word list file (.txt one word per line, or .json array)")
    parser.add_argument('--solution', help="play against a fixed solution word")
    parser.add_argument('--host')
    parser.add_argument('--port', type=int)
    return parser


def play(app_config, dictionary: Dictionary, solution=None) -> int:
    from wordle_game.console import run_game
    from wordle_game.services.game_service import GameSession

    try:
        session = GameSession(dictionary, solution=solution, max_rounds=app_config.MAX_ROUNDS)
    except InvalidSolutionError as e:
        print(f"Error: {e}")
        return 2

    run_game(session)
    return 0


def serve(app_config, dictionary: Dictionary, host: str, port: int) -> int:
    from wordle_game import create_app
    from wordle_game.services.game_service import initialize_game_service

    initialize_game_service(dictionary, app_config.MAX_ROUNDS)
    print("✓ Game service initialized successfully")

    app = create_app(app_config)
    print(f"\nStarting Wordle Game Server on {host}:{port}")
    print(f"Debug mode: {app_config.DEBUG}")
    print("=" * 50)

    app.run(host=host, port=port, debug=app_config.DEBUG)
    return 0


def main(argv=None) -> int:
    """Main function to load the word list and start the chosen front end."""
    args = build_parser().parse_args(argv)
    app_config = get_config(args.config)
    game_logger = initialize_game_logger(app_config.LOG_DIR, app_config.LOG_LEVEL)

    words_path = args.words or app_config.WORD_LIST_PATH
    try:
        dictionary = Dictionary.from_file(words_path)
    except (FileNotFoundError, ValueError) as e:
        game_logger.log_error(None, e, 'load_dictionary')
        raise

    game_logger.logger.info(f"Loaded {len(dictionary)} words from {words_path}")

    try:
        if args.mode == 'serve':
            return serve(app_config, dictionary,
                         args.host or app_config.HOST, args.port or app_config.PORT)
        return play(app_config, dictionary, args.solution)
    except KeyboardInterrupt:
        print("\nShutting down...")
        game_logger.logger.info("Wordle shutting down (KeyboardInterrupt)")
        return 130


if __name__ == '__main__':
    sys.exit(main())
