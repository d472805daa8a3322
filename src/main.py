"""
Main entry point for generating and checking scrambled squares puzzles.

Usage:
    python -m src.main generate config.yaml --dictionary words.txt
    python -m src.main generate --allow-fallback --seed 7 --output puzzles/today.json --verbose
    python -m src.main validate puzzles/today.json CATS "0,0 0,1 0,2 0,3"
"""

import argparse
import sys
from datetime import date, datetime
from pathlib import Path

import yaml

from .generator import PuzzleConfig, Puzzle, PuzzleGenerationError, generate_daily_puzzle
from .utils.grid_visualizer import render_grid, render_path
from .verifiers import DictionaryLoadError, load_dictionary, parse_path, validate_submission


def load_config(config_path: str) -> PuzzleConfig:
    """Load puzzle configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return PuzzleConfig(**data)


def run_generate(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config) if args.config else PuzzleConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    dictionary_path = args.dictionary or config.dictionary_path
    allow_fallback = args.allow_fallback or config.allow_fallback
    try:
        dictionary = load_dictionary(dictionary_path, allow_fallback=allow_fallback)
    except DictionaryLoadError as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        return 1

    if dictionary.is_fallback:
        print("Warning: using the embedded fallback word list", file=sys.stderr)

    try:
        puzzle_date = date.fromisoformat(args.date) if args.date else None
    except ValueError as e:
        print(f"Invalid --date: {e}", file=sys.stderr)
        return 1

    try:
        puzzle = generate_daily_puzzle(
            dictionary,
            config=config,
            puzzle_date=puzzle_date,
            seed=args.seed,
            verbose=args.verbose,
        )
    except PuzzleGenerationError as e:
        print(f"Error generating puzzle: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("puzzles") / f"puzzle_{puzzle.puzzle_id}_{timestamp}.json"
    puzzle.save(output_path)

    print()
    print("=== Puzzle Summary ===")
    print(f"Puzzle: {puzzle.puzzle_id}")
    print(render_grid(puzzle.grid))
    print(f"Words: {puzzle.word_count}")
    print(f"Attempts: {puzzle.attempts}")
    if args.verbose:
        print(", ".join(puzzle.words))
    print(f"Saved to: {output_path}")
    return 0


def run_validate(args: argparse.Namespace) -> int:
    try:
        puzzle = Puzzle.load(args.puzzle)
    except Exception as e:
        print(f"Error loading puzzle {args.puzzle}: {e}", file=sys.stderr)
        return 1

    positions, errors = parse_path(args.path)
    if errors:
        for err in errors:
            print(f"✗ {err.message}", file=sys.stderr)
        return 1

    result = validate_submission(puzzle.grid, positions, args.word, puzzle.word_set)

    print(render_path(puzzle.grid, positions))
    print()
    if result.valid:
        print(f"✓ {result.word}: {result.reason} (+{result.score})")
        return 0
    print(f"✗ {result.word}: {result.reason} [{result.code}]")
    return 2


def main():
    parser = argparse.ArgumentParser(
        description="Generate and check scrambled squares puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 4
  min_word_count: 10
  max_attempts: 100
  seed: 42
  dictionary_path: data/words.txt
  sampler:
    min_vowels: 4
    min_consonants: 8
    mixed_decay: 0.7
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a daily puzzle")
    generate.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used without one)"
    )
    generate.add_argument(
        "--dictionary", "-d",
        help="Word list, one word per line (overrides dictionary_path)"
    )
    generate.add_argument(
        "--allow-fallback",
        action="store_true",
        help="Use the small embedded word list when no dictionary is given"
    )
    generate.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible puzzles"
    )
    generate.add_argument(
        "--date",
        help="Puzzle date as YYYY-MM-DD (default: today)"
    )
    generate.add_argument(
        "--output", "-o",
        help="Path to save the puzzle JSON (default: puzzles/puzzle_<date>_<timestamp>.json)"
    )
    generate.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )
    generate.set_defaults(func=run_generate)

    validate = subparsers.add_parser("validate", help="Check a word and path against a saved puzzle")
    validate.add_argument("puzzle", help="Path to a puzzle JSON file")
    validate.add_argument("word", help="The claimed word")
    validate.add_argument("path", help='Cells in order, e.g. "0,0 0,1 1,2"')
    validate.set_defaults(func=run_validate)

    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
