"""Command-line front door for interscan.

Reads one line (from arguments or an interactive prompt), splits it into a
root path and an ignore set, then prints the tree followed by totals.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import config
from .file_tree_model import is_directory
from .input_line import IGNORE_DIRECTIVE_RE, ParsedInput, split_input_line
from .output import ConsoleSink, header_line, ignore_echo_line, summary_lines
from .tree_model import DEFAULT_MAX_DEPTH, TraversalCounts, iter_tree_lines
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

PROMPT = "Enter Path : "
EMPTY_INPUT_MESSAGE = "No input provided. Exiting."
INVALID_PATH_MESSAGE = "Invalid or inaccessible directory path. Exiting."


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _theme_name(value: str) -> str:
    """argparse type for known UI theme names."""
    candidate = value.strip().lower()
    if candidate not in available_theme_names():
        raise argparse.ArgumentTypeError(
            f"unknown theme {value!r} (choose from: {', '.join(available_theme_names())})"
        )
    return normalize_theme_name(candidate)


def split_directive_args(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split ``argv`` before the first ignore directive word.

    Words from the directive on are extension tokens, not options.
    """
    for index, arg in enumerate(argv):
        if IGNORE_DIRECTIVE_RE.match(arg):
            return argv[:index], argv[index:]
    return argv, []


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interscan",
        description="Print a directory as a color-annotated tree with folder/file totals.",
        epilog="Input line: <path> [--ignore[:] ext ...]. Extensions may be separated by spaces, ',' or '&'.",
    )
    parser.add_argument(
        "line",
        nargs="*",
        help="Input line to use instead of the interactive prompt.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        type=_theme_name,
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--save-theme", action="store_true", help="Remember --theme as the default.")
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=None,
        help=f"Deepest folder level to enter (default: {DEFAULT_MAX_DEPTH}).",
    )
    parser.add_argument(
        "--show-unreadable",
        action="store_true",
        default=None,
        help="Mark folders that cannot be listed instead of showing them empty.",
    )
    return parser


def read_input_line(sink: ConsoleSink) -> str:
    """Prompt on the sink and read one line from stdin; EOF reads as empty."""
    sink.write_prompt(PROMPT)
    return sys.stdin.readline()


def run(
    parsed: ParsedInput,
    sink: ConsoleSink,
    max_depth: int = DEFAULT_MAX_DEPTH,
    unreadable_mode: str = "silent",
) -> TraversalCounts | None:
    """Validate the root, then print header, tree and totals to ``sink``.

    Returns the traversal counts, or ``None`` when the path was rejected.
    """
    if not parsed.path_text or not is_directory(Path(parsed.path_text)):
        sink.write_message(INVALID_PATH_MESSAGE)
        return None

    sink.write_blank()
    sink.write_line(header_line(parsed.path_text))
    if parsed.ignored_extensions:
        sink.write_line(ignore_echo_line(parsed.ignored_extensions))
        sink.write_blank()

    counts = TraversalCounts()
    sink.write_lines(
        iter_tree_lines(
            Path(parsed.path_text),
            parsed.ignored_extensions,
            counts,
            max_depth=max_depth,
            unreadable_mode=unreadable_mode,
        )
    )

    sink.write_blank()
    sink.write_lines(summary_lines(counts, max_depth=max_depth))
    return counts


def main(argv: list[str] | None = None) -> int:
    """Parse options, obtain the input line and render the tree.

    Empty input and invalid paths print a message and still exit with 0.
    """
    if argv is None:
        argv = sys.argv[1:]
    option_args, directive_args = split_directive_args(list(argv))
    args = build_parser().parse_intermixed_args(option_args)
    words = args.line + directive_args

    if args.save_theme and args.theme:
        config.save_theme_name(args.theme)
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    no_color = args.no_color or not sys.stdout.isatty()
    sink = ConsoleSink(sys.stdout, resolve_theme(theme_name, no_color=no_color))

    max_depth = args.max_depth or config.load_max_depth() or DEFAULT_MAX_DEPTH
    show_unreadable = args.show_unreadable if args.show_unreadable is not None else config.load_show_unreadable()

    line = " ".join(words) if words else read_input_line(sink)
    if not line.strip():
        sink.write_message(EMPTY_INPUT_MESSAGE)
        return 0

    run(
        split_input_line(line.strip()),
        sink,
        max_depth=max_depth,
        unreadable_mode="mark" if show_unreadable else "silent",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
