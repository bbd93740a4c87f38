import argparse
import sys
from typing import List, Optional, Tuple

from coder import BITS_PER_SYMBOL, TextCoder
from huffman import HuffmanError, tree_height

PROMPT = "Enter text: "  #: Shown before reading the input line
CODES_HEADER = "Huffman codes:"
ENCODED_LABEL = "Encoded: "
DECODED_LABEL = "Decoded: "


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Build a Huffman code for a line of text, "
                    "encode it and decode it back"
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to encode (default: read one line from stdin)",
    )
    parser.add_argument(
        "-P",
        "--no-prompt",
        action="store_true",
        help="Do not print the input prompt",
    )
    parser.add_argument(
        "-s",
        "--strict",
        action="store_true",
        help="Fail on a trailing incomplete code while decoding",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print size before/after encoding, tree height "
             "and the compression ratio",
    )
    return parser


def _read_line(stream, prompt: Optional[str]) -> str:
    """Read one line of text, without its line terminator.

    Only a single ``"\\n"`` or ``"\\r\\n"`` is removed; any other trailing
    characters are part of the text.

    :param stream: Text stream to read from.
    :param prompt: Prompt to print first, or ``None``.
    :type prompt: str | None
    :returns: The line read; empty string at end of input.
    :rtype: str
    """
    if prompt:
        sys.stdout.write(prompt)
        sys.stdout.flush()
    line = stream.readline()
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _sorted_codes(codes) -> List[Tuple[str, str]]:
    """Order code table entries by code length, then by symbol."""
    return sorted(codes.items(), key=lambda item: (len(item[1]), item[0]))


def _fmt_bits(n: int) -> str:
    """Format a digit count like ``88 bits``.

    :param n: Number of digits.
    :type n: int
    :returns: Human-readable string.
    :rtype: str
    """
    return f"{n} bit" if n == 1 else f"{n} bits"


def report(text: str, strict: bool = False, stats: bool = False) -> str:
    """Encode and decode ``text``, printing the code table and both results.

    :param text: Text to process.
    :type text: str
    :param strict: Decode trailing digits strictly.
    :type strict: bool
    :param stats: Also print sizes and compression ratio.
    :type stats: bool
    :returns: The decoded text.
    :rtype: str
    :raises HuffmanError: If encoding or decoding fails.
    """
    coder = TextCoder(text)

    print()
    print(CODES_HEADER)
    for symbol, code in _sorted_codes(coder.codes):
        print(f"{symbol}: {code}")

    encoded = coder.encode()
    print()
    print(ENCODED_LABEL + encoded)

    decoded = coder.decode(encoded, strict=strict)
    print(DECODED_LABEL + decoded)

    if stats:
        print("Size before encoding: ", _fmt_bits(len(text) * BITS_PER_SYMBOL))
        print("Size after encoding: ", _fmt_bits(len(encoded)))
        print("Tree height: ", tree_height(coder.root))
        ratio = coder.compression_ratio()
        if ratio is not None:
            print(f"Compression ratio: {ratio:.2f}")
    return decoded


def main(argv: Optional[List[str]] = None, stdin=None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: List[str] | None
    :param stdin: Stream to read the text from instead of ``sys.stdin``.
    :returns: Process exit code.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    if args.text is not None:
        text = args.text
    else:
        prompt = None if args.no_prompt else PROMPT
        text = _read_line(sys.stdin if stdin is None else stdin, prompt)

    try:
        decoded = report(text, strict=args.strict, stats=args.stats)
    except HuffmanError as e:
        print(f"[!] {e}")
        return 1
    if decoded != text:
        print("[!] Decoded text does not match the input")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
