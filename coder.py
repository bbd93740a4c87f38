from typing import Dict, Optional

from huffman import (
    ONE,
    ZERO,
    HuffmanNode,
    MalformedInputError,
    SymbolNotFoundError,
    build_codes,
    build_tree,
    count_frequencies,
)

BITS_PER_SYMBOL = 8  #: Fixed-width baseline used for the compression ratio


def encode(text: str, codes: Dict[str, str]) -> str:
    """Concatenate the code of every character of ``text``.

    :param text: Text to encode.
    :type text: str
    :param codes: Mapping from symbol to code.
    :type codes: Dict[str, str]
    :returns: Digit string made of ``"0"`` and ``"1"``.
    :rtype: str
    :raises SymbolNotFoundError: If a character of ``text`` has no code.
    """
    parts = []
    for pos, ch in enumerate(text):
        try:
            parts.append(codes[ch])
        except KeyError:
            raise SymbolNotFoundError(
                f"No code for symbol {ch!r} at position {pos}"
            ) from None
    return "".join(parts)


def decode(bits: str, root: Optional[HuffmanNode], strict: bool = False) -> str:
    """Walk the tree digit by digit and emit a symbol at every leaf.

    A trailing path that does not reach a leaf is dropped, unless
    ``strict`` is set.

    :param bits: Digit string produced by :func:`encode`.
    :type bits: str
    :param root: Root of the tree the codes were derived from.
    :type root: HuffmanNode | None
    :param strict: Raise on a trailing incomplete code instead of dropping it.
    :type strict: bool
    :returns: Decoded text.
    :rtype: str
    :raises MalformedInputError: If ``bits`` does not fit the tree.
    """
    if not bits:
        return ""
    if root is None:
        raise MalformedInputError("Cannot decode digits without a tree")
    if root.is_leaf:
        return _decode_single(bits, root)

    out = []
    node = root
    for pos, bit in enumerate(bits):
        node = _step(node, bit, pos)
        if node.is_leaf:
            out.append(node.symbol)
            node = root

    if strict and node is not root:
        raise MalformedInputError(
            f"Incomplete code at end of input ({len(bits)} digits)"
        )
    return "".join(out)


def _step(node: HuffmanNode, bit: str, pos: int) -> HuffmanNode:
    if bit == ZERO:
        child = node.left
    elif bit == ONE:
        child = node.right
    else:
        raise MalformedInputError(f"Invalid digit {bit!r} at position {pos}")
    if child is None:
        raise MalformedInputError(f"No child for digit {bit!r} at position {pos}")
    return child


def _decode_single(bits: str, root: HuffmanNode) -> str:
    # a lone leaf is coded as ZERO
    for pos, bit in enumerate(bits):
        if bit != ZERO:
            raise MalformedInputError(
                f"Invalid digit {bit!r} at position {pos} for single-symbol tree"
            )
    return root.symbol * len(bits)


class TextCoder:
    """Huffman coder for a single text.

    Owns the frequency table, the tree and the code table built from one
    text. The tree goes away together with the coder.

    :ivar text: The text the coder was built from.
    :type text: str
    :ivar frequencies: Mapping from symbol to occurrence count.
    :type frequencies: Dict[str, int]
    :ivar root: Root of the Huffman tree; ``None`` for empty text.
    :type root: HuffmanNode | None
    :ivar codes: Mapping from symbol to code.
    :type codes: Dict[str, str]
    """

    def __init__(self, text: str = ""):
        """Count ``text`` and build its tree and code table.

        :param text: Text to build the code for.
        :type text: str
        :returns: None
        :rtype: None
        """
        self.text = text
        self.frequencies = count_frequencies(text)
        self.root = build_tree(self.frequencies)
        self.codes = build_codes(self.root)

    def encode(self, text: Optional[str] = None) -> str:
        """Encode ``text`` (defaults to the coder's own text).

        :param text: Text to encode.
        :type text: str | None
        :returns: Digit string.
        :rtype: str
        :raises SymbolNotFoundError: If ``text`` uses a symbol without a code.
        """
        return encode(self.text if text is None else text, self.codes)

    def decode(self, bits: str, strict: bool = False) -> str:
        return decode(bits, self.root, strict=strict)

    def encoded_length(self, text: Optional[str] = None) -> int:
        """Number of digits ``text`` encodes to, without building the string."""
        if text is None:
            return sum(
                freq * len(self.codes[sym])
                for sym, freq in self.frequencies.items()
            )
        return len(self.encode(text))

    def compression_ratio(self, text: Optional[str] = None) -> Optional[float]:
        """Fixed-width size divided by encoded size.

        :param text: Text to measure (defaults to the coder's own text).
        :type text: str | None
        :returns: The ratio, or ``None`` for empty text.
        :rtype: float | None
        """
        text = self.text if text is None else text
        if not text:
            return None
        return len(text) * BITS_PER_SYMBOL / self.encoded_length(text)
