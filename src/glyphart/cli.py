import argparse
import logging
import os
import sys
from pathlib import Path

from PIL import Image

from glyphart.charsets import DEFAULT_CHARSET, charset_names
from glyphart.converter import convert, to_ansi, to_plain_text
from glyphart.model import ConversionConfig, PixelBuffer


def terminal_columns() -> int:
    """Width of the terminal in columns, or 80 if stdout is not a tty."""
    if not sys.stdout.isatty():
        return 80
    return os.get_terminal_size().columns


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Render an image as glyph art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-s", "--size", type=positive_int, default=None, help="Output width in columns (default: terminal width)"
    )
    parser.add_argument(
        "-m",
        "--charset",
        default=DEFAULT_CHARSET,
        choices=charset_names(),
        help=f"Glyph ramp to use (default: {DEFAULT_CHARSET})",
    )
    parser.add_argument("-c", "--colour", action="store_true", default=False, help="Enable truecolor ANSI output")
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Invert brightness")
    parser.add_argument("-o", "--output", default=None, help="Write plain text to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    width = args.size if args.size is not None else terminal_columns()

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    config = ConversionConfig(
        target_columns=width,
        charset_id=args.charset,
        color_mode=args.colour,
        invert_brightness=args.invert,
    )

    try:
        with Image.open(image_path) as image:
            buffer = PixelBuffer.from_image(image)
    except OSError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    result = convert(buffer, config)

    if args.output is not None:
        Path(args.output).write_text(to_plain_text(result), encoding="utf-8")
    else:
        print(to_ansi(result))
