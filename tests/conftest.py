"""Shared test fixtures for scope-dimmer."""

from pathlib import Path

import pytest

from scope_dimmer.models.document import TextDocument

# Get the fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"
DOCUMENTS_DIR = FIXTURES_DIR / "documents"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def nested_blocks_path() -> Path:
    """Return the path of a brace-delimited sample with two nested blocks."""
    return DOCUMENTS_DIR / "nested_blocks.js"


@pytest.fixture
def nested_blocks(nested_blocks_path: Path) -> TextDocument:
    """Load the brace-delimited sample.

    Lines:
        0 ``function f() {``
        1 ``  if (true) {``
        2 ``    doWork();``
        3 ``  }``
        4 ``}``
        5 (empty)
    """
    return TextDocument.from_path(nested_blocks_path)


@pytest.fixture
def outline() -> TextDocument:
    """Load an indentation-only sample without any brackets.

    Lines:
        0 ``def handler:``
        1 ``    first``
        2 ``    second``
        3 ``        nested``
        4 ``    third``
        5 ``done``
        6 (empty)
    """
    return TextDocument.from_path(DOCUMENTS_DIR / "outline.txt")


@pytest.fixture
def inline_brackets() -> TextDocument:
    """Return an indented line holding a bracket pair nested in another."""
    return TextDocument("def f():\n    { ( x ) }", uri="inline.py")
