import heapq
from collections import Counter
from typing import Dict, Iterator, Optional, Tuple

ZERO = "0"  #: Digit appended when descending to a left child
ONE = "1"  #: Digit appended when descending to a right child


class HuffmanError(Exception):
    """Base class for Huffman coding failures."""


class SymbolNotFoundError(HuffmanError, LookupError):
    """Raised when a symbol to encode has no entry in the code table."""


class MalformedInputError(HuffmanError, ValueError):
    """Raised when a digit sequence does not match the decoding tree."""


class HuffmanNode:
    """One character leaf or one merge point of a Huffman tree.

    A leaf carries a character and how often it occurs in the text. A merge
    point carries no character, owns exactly two subtrees and weighs as
    much as both of them together. Descending left adds ``ZERO`` to a code,
    descending right adds ``ONE``.

    :ivar symbol: Character of a leaf; ``None`` at a merge point.
    :type symbol: str | None
    :ivar freq: Occurrences of the character, or the merged weight.
    :type freq: int
    :ivar left: Subtree reached with ``ZERO``.
    :type left: HuffmanNode | None
    :ivar right: Subtree reached with ``ONE``.
    :type right: HuffmanNode | None
    """

    __slots__ = ("symbol", "freq", "left", "right")

    def __init__(self, symbol=None, freq=0, left=None, right=None):
        """Make a character leaf, or a merge point when children are given.

        :param symbol: The character a leaf stands for.
        :type symbol: str | None
        :param int freq: Occurrence count or merged weight.
        :param left: Subtree for ``ZERO``.
        :type left: HuffmanNode|None
        :param right: Subtree for ``ONE``.
        :type right: HuffmanNode|None
        """
        self.symbol = symbol
        self.freq = freq
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode({self.symbol!r}, {self.freq})"
        return f"HuffmanNode(freq={self.freq})"


def count_frequencies(text: str) -> Counter:
    """Count occurrences of every character in ``text``.

    :param text: Input text, possibly empty.
    :type text: str
    :returns: Mapping from character to its number of occurrences.
    :rtype: Counter
    """
    return Counter(text)


def build_tree(frequencies: Dict[str, int]) -> Optional[HuffmanNode]:
    """Build a Huffman tree from a symbol frequency table.

    The two lowest-weight nodes are merged until one node is left. The
    first node popped becomes the left child. Equal weights are ordered
    by a sequence number: leaves are numbered in ascending symbol order
    and merged nodes after all leaves, in creation order.

    :param frequencies: Mapping from symbol to observed frequency.
    :type frequencies: Dict[str, int]
    :returns: Root of the tree, or ``None`` if ``frequencies`` is empty.
    :rtype: HuffmanNode | None
    :raises ValueError: If a frequency is not a positive integer.
    """
    if not frequencies:
        return None

    heap = []
    for seq, symbol in enumerate(sorted(frequencies)):
        freq = frequencies[symbol]
        if not isinstance(freq, int) or freq <= 0:
            raise ValueError(f"Invalid frequency for {symbol!r}: {freq!r}")
        heap.append((freq, seq, HuffmanNode(symbol=symbol, freq=freq)))
    heapq.heapify(heap)

    seq = len(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffmanNode(freq=left.freq + right.freq, left=left, right=right)
        heapq.heappush(heap, (merged.freq, seq, merged))
        seq += 1

    return heap[0][2]


def build_codes(root: Optional[HuffmanNode]) -> Dict[str, str]:
    """Derive the code table by walking the tree from ``root``.

    A tree made of a single leaf gets the one-digit code ``"0"``.

    :param root: Root of a Huffman tree, or ``None``.
    :type root: HuffmanNode | None
    :returns: Mapping from symbol to its code.
    :rtype: Dict[str, str]
    """
    codes: Dict[str, str] = {}
    if root is None:
        return codes
    if root.is_leaf:
        codes[root.symbol] = ZERO
        return codes

    # right pushed first so the left subtree is visited first
    stack = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = path
            continue
        stack.append((node.right, path + ONE))
        stack.append((node.left, path + ZERO))
    return codes


def iter_leaves(root: Optional[HuffmanNode]) -> Iterator[Tuple[str, int]]:
    """Yield ``(symbol, depth)`` for every leaf, left to right."""
    if root is None:
        return
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.is_leaf:
            yield node.symbol, depth
            continue
        stack.append((node.right, depth + 1))
        stack.append((node.left, depth + 1))


def tree_height(root: Optional[HuffmanNode]) -> int:
    """Depth of the deepest leaf; ``0`` for a single leaf or no tree."""
    return max((depth for _, depth in iter_leaves(root)), default=0)


def is_prefix_free(codes: Dict[str, str]) -> bool:
    """Check that no code is a prefix of another symbol's code.

    After sorting, a code that prefixes any other code also prefixes
    its immediate successor, so adjacent pairs are enough.

    :param codes: Mapping from symbol to code.
    :type codes: Dict[str, str]
    :returns: ``True`` if the code set is prefix-free.
    :rtype: bool
    """
    ordered = sorted(codes.values())
    return all(
        not b.startswith(a) for a, b in zip(ordered, ordered[1:])
    )
