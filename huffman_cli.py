#!/usr/bin/env python3
"""
Command-line driver for the Huffman text codec.

Builds a codec from one line of text, encodes that same text and decodes it
back, printing both results.

Run with:
    huffman-codec "some text" [--show-codes] [--strict] [-v]
    python -m huffman_cli            (prompts for a line on stdin)
"""
import argparse
import logging
import sys

from huffman_codec import HuffmanCodec
from huffman_errors import HuffmanError


def build_parser():
    parser = argparse.ArgumentParser(description="Encode and decode a line of text with a Huffman code")
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to encode (default: read one line from stdin)"
    )
    parser.add_argument(
        "--show-codes",
        action="store_true",
        help="Print the generated code table"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on characters or bits the code cannot represent"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def print_codes(codes):
    print("\nCode table:")
    for char, code in sorted(codes.items(), key=lambda item: (len(item[1]), item[0])):
        print(f"  {char!r}: {code or '(empty)'}")


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    text = args.text
    if text is None:
        print("Welcome to Huffman program.")
        print("Enter a word: ")
        text = sys.stdin.readline().rstrip("\n")

    try:
        codec = HuffmanCodec(text, strict=args.strict)
        encoded = codec.encode(text)
        decoded = codec.decode(encoded)
    except HuffmanError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.show_codes:
        print_codes(codec.codes)

    print(f"\nEncoded string: {encoded}")
    print(f"Decoded string: {decoded}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
