#!/usr/bin/env python3
"""
fv1 Font Dump
Prints the header and glyph bitmaps of an fv1 (FNT1) font file using '1'/'0' text art,
and optionally writes glyph images.
"""

import argparse
import logging
import sys

from .decoders import (
    ByteSource, FontDecodeError, InvalidCodepoint, MagicPolicy, codepoint_to_index,
    decode_header, iter_glyphs, load_font,
)
from .displays.image import glyph_sheet, grid_to_image
from .displays.text_dump import char_label, format_glyph, format_header
from .processing.raster import rasterize

logger = logging.getLogger(__name__)


def parse_char(value: str) -> int:
    """Accept a single character, or an integer codepoint (decimal or 0x hex)."""
    if len(value) == 1:
        return ord(value)
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a character or codepoint: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Dump glyphs of an fv1 (FNT1) bitmap font')
    parser.add_argument('font_file', help='Path to the font file')
    select = parser.add_mutually_exclusive_group()
    select.add_argument('--char', type=parse_char, help='Character or codepoint to dump')
    select.add_argument('--range', nargs=2, type=parse_char, metavar=('START', 'END'),
                        help='Dump an inclusive range of characters')
    select.add_argument('--stop', type=parse_char,
                        help='Stream glyphs from the start of the table and stop after this character')
    parser.add_argument('--strict', action='store_true', help='Abort on a bad header magic')
    parser.add_argument('--ruler', action='store_true', help='Print a column ruler above each bitmap')
    parser.add_argument('--image', metavar='OUT.png', help='Write the selected glyph (or range) as an image')
    parser.add_argument('--scale', type=int, default=8, help='Image magnification (default: 8)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def dump_stream(path: str, stop: int, policy: MagicPolicy, ruler: bool) -> None:
    """Print glyphs as they are read, up to and including ``stop``."""
    with open(path, 'rb') as f:
        src = ByteSource(f)
        header = decode_header(src, policy)
        print('\n'.join(format_header(header)))
        print("Glyphs:")
        print(f"Stop char: '{char_label(stop)}'")
        for codepoint, glyph in iter_glyphs(src, stop=stop):
            print('\n'.join(format_glyph(codepoint, glyph, ruler)))
            print()


def run(args) -> int:
    policy = MagicPolicy.STRICT if args.strict else MagicPolicy.LENIENT

    # Reject bad codepoints before touching the file
    requested = [cp for cp in (args.char, args.stop) if cp is not None] + list(args.range or [])
    for cp in requested:
        codepoint_to_index(cp)

    if args.stop is not None:
        dump_stream(args.font_file, args.stop, policy, args.ruler)
        return 0

    font = load_font(args.font_file, policy)
    print('\n'.join(format_header(font.header)))

    if args.char is not None:
        codepoints = [args.char]
    elif args.range:
        codepoints = list(range(args.range[0], args.range[1] + 1))
    else:
        codepoints = []
        print(f"Glyphs: {len(font)}, with bitmaps: {sum(1 for _ in font.non_empty())}")

    for cp in codepoints:
        print(f"\n{'=' * 40}")
        print('\n'.join(format_glyph(cp, font.glyph(cp), args.ruler)))

    if args.image:
        if args.range:
            image = glyph_sheet(font, args.range[0], args.range[1], scale=args.scale)
        elif args.char is not None:
            glyph = font.glyph(args.char)
            if glyph.is_empty:
                print(f"Character {args.char} has no bitmap, no image written")
                return 0
            image = grid_to_image(rasterize(glyph), args.scale)
        else:
            print("--image needs --char or --range")
            return 1
        image.save(args.image)
        print(f"Wrote {args.image}")

    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.range and args.range[0] > args.range[1]:
        parser.error(f"range start {args.range[0]} is after end {args.range[1]}")
    if args.stop is not None and args.image:
        parser.error("--image cannot be combined with --stop")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    logger.debug(f"Arguments: {args}")

    try:
        return run(args)
    except InvalidCodepoint as e:
        print(f"Error: {e}")
        return 1
    except FontDecodeError as e:
        print(f"Error: {e}")
        return 2
    except OSError as e:
        print(f"Error: {e}")
        return 2


if __name__ == '__main__':
    sys.exit(main())
