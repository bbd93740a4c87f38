import pytest

from huffman import (
    HuffmanNode,
    build_codes,
    build_tree,
    count_frequencies,
    is_prefix_free,
    iter_leaves,
    tree_height,
)


def _internal_nodes(root):
    stack = [root]
    while stack:
        node = stack.pop()
        if not node.is_leaf:
            yield node
            stack.extend((node.left, node.right))


def test_count_frequencies_empty():
    assert count_frequencies("") == {}


def test_count_frequencies_abracadabra():
    freqs = count_frequencies("abracadabra")
    assert freqs == {"a": 5, "b": 2, "r": 2, "c": 1, "d": 1}


def test_count_frequencies_keeps_distinct_characters():
    freqs = count_frequencies("aA a")
    assert freqs == {"a": 2, "A": 1, " ": 1}


def test_build_tree_empty_returns_none():
    assert build_tree({}) is None
    assert build_codes(None) == {}


def test_build_single_symbol_gets_one_digit_code():
    root = build_tree({"a": 4})
    assert root.is_leaf
    assert root.symbol == "a" and root.freq == 4
    assert build_codes(root) == {"a": "0"}


def test_build_tree_two_symbols():
    root = build_tree({"b": 3, "a": 1})
    assert root.freq == 4
    assert root.left.symbol == "a"
    assert root.right.symbol == "b"
    assert build_codes(root) == {"a": "0", "b": "1"}


def test_build_tree_rejects_bad_frequency():
    with pytest.raises(ValueError):
        build_tree({"a": 0})
    with pytest.raises(ValueError):
        build_tree({"a": 2, "b": -1})


def test_weight_conservation():
    text = "The quick brown fox jumps over the lazy dog."
    root = build_tree(count_frequencies(text))
    assert root.freq == len(text)
    for node in _internal_nodes(root):
        assert node.left is not None and node.right is not None
        assert node.freq == node.left.freq + node.right.freq


def test_every_leaf_below_root_when_two_or_more_symbols():
    root = build_tree(count_frequencies("hello world"))
    depths = dict(iter_leaves(root))
    assert set(depths) == set("helo wrd")
    assert min(depths.values()) >= 1


def test_abracadabra_a_has_shortest_code():
    codes = build_codes(build_tree(count_frequencies("abracadabra")))
    assert set(codes) == set("abrcd")
    assert all(len(codes["a"]) <= len(c) for c in codes.values())
    assert len(codes["a"]) == 1


def test_codes_are_prefix_free(sample_text):
    codes = build_codes(build_tree(count_frequencies(sample_text)))
    assert is_prefix_free(codes)
    assert all(codes.values())
    assert set(codes) == set(sample_text)


def test_is_prefix_free_detects_prefix():
    assert is_prefix_free({"a": "0", "b": "10", "c": "11"})
    assert not is_prefix_free({"a": "1", "b": "10"})
    assert not is_prefix_free({"a": "01", "b": "01"})


def test_build_is_deterministic():
    freqs = {"x": 3, "y": 3, "z": 3, "w": 3, "v": 1}
    first = build_codes(build_tree(freqs))
    second = build_codes(build_tree(dict(reversed(list(freqs.items())))))
    assert first == second


def test_ties_prefer_lower_symbol():
    root = build_tree({"b": 1, "a": 1, "c": 1})
    # a and b merge first, c is taken before the merged node
    assert root.left.symbol == "c"
    assert root.right.left.symbol == "a"
    assert root.right.right.symbol == "b"


def test_skewed_tree_has_no_recursion_limit(skewed_frequencies):
    root = build_tree(skewed_frequencies)
    codes = build_codes(root)
    assert len(codes) == len(skewed_frequencies)
    assert tree_height(root) == len(skewed_frequencies) - 1
    assert max(len(c) for c in codes.values()) == len(skewed_frequencies) - 1
    assert is_prefix_free(codes)


def test_tree_height_small_trees():
    assert tree_height(None) == 0
    assert tree_height(HuffmanNode("a", 1)) == 0
    assert tree_height(build_tree({"a": 1, "b": 1})) == 1


def test_iter_leaves_left_to_right():
    root = build_tree({"a": 1, "b": 2, "c": 4})
    assert list(iter_leaves(root)) == [("a", 2), ("b", 2), ("c", 1)]
