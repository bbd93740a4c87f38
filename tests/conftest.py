import io
import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


@pytest.fixture()
def run_cli(m, capsys):
    """Run ``main.main`` with the given stdin text and return (code, stdout)."""

    def _run(argv, stdin_text=""):
        code = m.main(argv, stdin=io.StringIO(stdin_text))
        return code, capsys.readouterr().out

    return _run


SAMPLE_TEXTS = [
    "",
    "a",
    "aaaa",
    "ab",
    "abracadabra",
    "hello world",
    "The quick brown fox jumps over the lazy dog.",
    "привет, мир",
    "\t tabs and  spaces \t",
]


@pytest.fixture(params=SAMPLE_TEXTS, ids=repr)
def sample_text(request):
    """Texts covering empty, single-symbol, unicode and whitespace input."""
    return request.param


def fibonacci_frequencies(n: int):
    """Frequencies that make the Huffman tree a chain of depth ``n - 1``."""
    freqs = {}
    a, b = 1, 1
    for i in range(n):
        freqs[chr(0x4E00 + i)] = a
        a, b = b, a + b
    return freqs


@pytest.fixture()
def skewed_frequencies():
    """Chain-shaped tree deeper than the default recursion limit."""
    return fibonacci_frequencies(1200)
