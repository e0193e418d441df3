"""
Case conversions built on a single word splitter.

Every converter accepts either a string or a list of already split pieces, so
``camel_case("hello world")`` and ``camel_case(["hello", "world"])`` agree.
"""

from typing import List, Sequence, Union

import regex

from chalked_cases.errors import InvalidArgument

Text = Union[str, Sequence[str]]

UPPER = r"[\p{Lu}\p{Lt}]"
# Letters from scripts without case behave like lowercase
LOWER = r"[\p{Ll}\p{Lm}\p{Lo}]"

# Acronyms stop before a capitalized word: "XMLHttp" -> "XML", "Http"
PIECE_PATTERN = regex.compile(
    rf"{UPPER}+(?={UPPER}{LOWER})"
    rf"|{UPPER}?{LOWER}+"
    rf"|{UPPER}+"
    r"|\p{N}+"
)


def split_pieces(text: str) -> List[str]:
    """
    Split a string into lowercase word pieces.

    Pieces are separated by whitespace, dashes, underscores and any other
    punctuation, and by case boundaries inside a word.

    Parameters
    ----------
    text : str
        The string to split, in any casing.

    Returns
    -------
    list of str
        The pieces in order, lowercased. Empty when ``text`` has no letters or digits.
    """
    if not isinstance(text, str):
        raise InvalidArgument(f"Expected a string, got {type(text).__name__}")

    return [piece.lower() for piece in PIECE_PATTERN.findall(text)]


def _pieces(text: Text) -> List[str]:
    if isinstance(text, str):
        return split_pieces(text)

    if not isinstance(text, (list, tuple)):
        raise InvalidArgument(f"Expected a string or a list of strings, got {type(text).__name__}")

    pieces: List[str] = []
    for item in text:
        pieces.extend(split_pieces(item))
    return pieces


def _capitalize(piece: str) -> str:
    return piece[:1].upper() + piece[1:]


def camel_case(text: Text) -> str:
    """Convert to camelCase."""
    pieces = _pieces(text)
    if not pieces:
        return ""
    return pieces[0] + "".join(_capitalize(piece) for piece in pieces[1:])


def pascal_case(text: Text) -> str:
    """Convert to PascalCase."""
    return "".join(_capitalize(piece) for piece in _pieces(text))


def snake_case(text: Text) -> str:
    """Convert to snake_case."""
    return "_".join(_pieces(text))


def kebab_case(text: Text) -> str:
    """Convert to kebab-case."""
    return "-".join(_pieces(text))


def constant_case(text: Text) -> str:
    """Convert to CONSTANT_CASE."""
    return "_".join(piece.upper() for piece in _pieces(text))


def title_case(text: Text) -> str:
    """Convert to Title Case. Every piece is capitalized, short words included."""
    return " ".join(_capitalize(piece) for piece in _pieces(text))
