#!/usr/bin/env python3
"""Tag cloud generator CLI."""

import argparse
import sys
from pathlib import Path

import yaml

from .config import CloudConfig, parse_key_value_args
from .counter import count_file
from .pipeline import build_cloud
from .render import render_html, write_html
from .sources import SOURCE_CACHE_DIR_NAME, fetch_text, is_url


def parse_word_count(text: str) -> tuple[int, str | None]:
    """Parse the requested number of words.

    Args:
        text: Raw user input.

    Returns:
        Tuple (count, error). On malformed or negative input the count is
        0 and error describes the problem.
    """
    try:
        value = int(text.strip())
    except ValueError:
        return 0, f"Not a number of words: {text.strip()!r}"
    if value < 0:
        return 0, "Number of words cannot be negative"
    return value, None


def main() -> int:
    """Generate a tag cloud."""
    parser = argparse.ArgumentParser(
        description="Generate an HTML tag cloud of the most frequent words in a text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Prompt for everything
  %(prog)s book.txt cloud.html -n 50
  %(prog)s https://example.com/book.txt cloud.html -n 100
  %(prog)s https://example.com/book.txt cloud.html -n 100 --refresh
  %(prog)s book.txt cloud.html --config cloud.yml
  %(prog)s book.txt cloud.html --set font_min=8 font_max=48
        """,
    )

    parser.add_argument("input", nargs="?", help="Input text file or URL (prompted if omitted)")
    parser.add_argument("output", nargs="?", type=Path, help="Output HTML file (prompted if omitted)")
    parser.add_argument(
        "-n", "--words", metavar="N", help="Number of words in the cloud (prompted if omitted)"
    )
    parser.add_argument("--config", type=Path, metavar="FILE", help="YAML settings file")
    parser.add_argument(
        "--set",
        nargs="+",
        metavar="KEY=VALUE",
        help="Override settings (e.g., --set font_min=8 separators=' .,')",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Download a URL input again instead of using the cached copy",
    )

    args = parser.parse_args()

    # Load config
    try:
        config = CloudConfig.from_yaml(args.config) if args.config else CloudConfig()
        if args.set:
            config.override(parse_key_value_args(args.set))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    # Gather anything not given on the command line
    try:
        input_name = args.input or input("Enter an input file name: ").strip()
        output_path = args.output or Path(input("Enter an output file name: ").strip())
        if args.words is not None:
            words_text = args.words
        elif config.word_count is not None:
            words_text = str(config.word_count)
        else:
            words_text = input("Enter the amount of words to be in the cloud: ")
    except EOFError:
        print("Error: Error reading system input", file=sys.stderr)
        return 1

    n_words, error = parse_word_count(words_text)
    if error:
        print(f"Error: {error}; using 0", file=sys.stderr)

    # Resolve the source to a local file
    if is_url(input_name):
        fetched = fetch_text(
            input_name, output_path.parent / SOURCE_CACHE_DIR_NAME, refresh=args.refresh
        )
        if not fetched.ok:
            print(f"Error: {fetched.error}", file=sys.stderr)
            return 1
        if fetched.from_cache:
            print(f"Using cached copy of {input_name} (pass --refresh to download again)")
        else:
            print(f"Downloaded {input_name} ({fetched.encoding})")
        source_path = fetched.local_path
    else:
        source_path = Path(input_name)

    # Count words
    try:
        counts = count_file(source_path, config.separators)
    except OSError as e:
        print(f"Error: Error opening the input file {input_name}: {e}", file=sys.stderr)
        return 1
    if counts.error:
        print(f"Error: {counts.error}", file=sys.stderr)

    table = build_cloud(counts, n_words)
    document = render_html(table, input_name, config)

    try:
        write_html(output_path, document)
    except OSError as e:
        print(f"Error: Error writing the output file {output_path}: {e}", file=sys.stderr)
        return 1

    print(
        f"Top {len(table)} of {counts.unique_words} unique words "
        f"({counts.total_words} total) -> {output_path}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
