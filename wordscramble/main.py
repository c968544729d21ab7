"""
Main entry point for playing Word Scramble in a terminal.

Usage:
    python -m wordscramble.main
    python -m wordscramble.main config.yaml --seed 42 --verbose
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import yaml

from .environment import GameConfig, WordScramble, format_session, format_alert


RESTART_COMMAND = "/restart"
QUIT_COMMAND = "/quit"


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def show_alert(title: str, message: str) -> None:
    print(format_alert(title, message))


def show_session(session) -> None:
    print()
    print(format_session(session))
    print()


def play(game: WordScramble, stdin=None) -> int:
    """Read submissions line by line until /quit or end of input."""
    stdin = stdin or sys.stdin

    print(f"Make words from the letters of the root word. "
          f"Type {RESTART_COMMAND} for a new word, {QUIT_COMMAND} to stop.")
    show_session(game.session)

    for line in stdin:
        command = line.strip().lower()
        if command == QUIT_COMMAND:
            break
        if command == RESTART_COMMAND:
            game.restart()
            continue
        game.submit(line.rstrip("\r\n"))

    return game.session.score


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(
        description="Play Word Scramble",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  word_list_path: start.txt
  lexicon_path: /usr/share/dict/words
  language: en
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (bundled word lists by default)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for choosing root words (overrides the config)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print every accepted and rejected word"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.seed is not None:
        config = config.model_copy(update={"seed": args.seed})

    try:
        game = WordScramble.create(
            config=config,
            on_rejection=show_alert,
            on_update=show_session,
            verbose=args.verbose,
        )
    except (OSError, ValueError) as e:
        print(f"Error starting game: {e}", file=sys.stderr)
        return 1

    try:
        score = play(game)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        score = game.session.score

    print()
    print("=== Game Summary ===")
    print(f"Root word: {game.session.root_word}")
    print(f"Words found: {game.session.words_found}")
    print(f"Score: {score}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
