"""Main entry point for fdfgen."""

import argparse
import logging
import sys
from pathlib import Path

from .document import FdfDocument
from .layout import FrameLoader
from .presets import PRESETS

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="fdfgen",
        description="fdfgen - Frame definition (FDF) generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "definition",
        nargs="?",
        metavar="YAML",
        help="Frame definition file to compile",
    )
    source.add_argument(
        "-p", "--preset",
        choices=list(PRESETS.keys()),
        help="Compile a built-in preset instead of a file",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="Write the FDF to a file (default: stdout)",
    )
    indent = parser.add_mutually_exclusive_group()
    indent.add_argument(
        "--indent",
        type=int,
        default=4,
        metavar="N",
        help="Spaces per indentation level (default: 4)",
    )
    indent.add_argument(
        "--tabs",
        action="store_true",
        help="Indent with tabs instead of spaces",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the frame hierarchy instead of the FDF text",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)
    if args.indent < 0:
        parser.error("--indent must not be negative")
    return args


def load_document(args: argparse.Namespace) -> FdfDocument:
    """Build the document selected on the command line."""
    if args.preset:
        logger.debug("Building preset %s", args.preset)
        return PRESETS[args.preset]()
    return FrameLoader().load(args.definition)


def print_tree(document: FdfDocument) -> None:
    """Print the frame hierarchy, one frame per line."""
    def visit(frame, depth: int) -> None:
        indent = "  " * depth
        label = frame.name or '""'
        print(f"{indent}- {type(frame).__name__} {label}")
        for child in frame.children:
            visit(child, depth + 1)

    for frame in document.frames:
        visit(frame, 0)


def main(argv: list[str] | None = None) -> int:
    """Run the fdfgen command line."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        document = load_document(args)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    if args.tree:
        print_tree(document)
        return 0

    indent = "\t" if args.tabs else " " * args.indent
    if args.output:
        path = document.save(Path(args.output), indent=indent)
        print(f"Saved {len(list(document.iter_frames()))} frames to {path}")
    else:
        sys.stdout.write(document.to_text(indent=indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
