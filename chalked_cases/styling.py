"""
Chainable terminal styling on top of `click.style`.

    >>> from chalked_cases.styling import chalk
    >>> chalk.blue.bold("hello")
    '\\x1b[34m\\x1b[1mhello\\x1b[0m'

Every attribute returns a new `Chalk`, so styles can be built once and reused.
"""

import re
from typing import Any, Dict, List, Optional, Tuple, Union

import click

from chalked_cases.errors import InvalidArgument

Color = Union[str, int, Tuple[int, int, int]]

COLORS = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)

FOREGROUNDS: Dict[str, str] = {name: name for name in COLORS}
FOREGROUNDS.update({f"bright_{name}": f"bright_{name}" for name in COLORS})
FOREGROUNDS["gray"] = "bright_black"
FOREGROUNDS["grey"] = "bright_black"

BACKGROUNDS: Dict[str, str] = {f"bg_{name}": color for name, color in FOREGROUNDS.items()}

# chalk modifier name -> click.style keyword
MODIFIERS: Dict[str, str] = {
    "bold": "bold",
    "dim": "dim",
    "italic": "italic",
    "underline": "underline",
    "overline": "overline",
    "blink": "blink",
    "inverse": "reverse",
    "strikethrough": "strikethrough",
}

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


def _rgb(red: int, green: int, blue: int) -> Tuple[int, int, int]:
    for value in (red, green, blue):
        if not isinstance(value, int) or not 0 <= value <= 255:
            raise InvalidArgument(f"RGB values must be integers between 0 and 255, got {value!r}")
    return (red, green, blue)


def _hex(code: str) -> Tuple[int, int, int]:
    match = HEX_PATTERN.match(code) if isinstance(code, str) else None
    if match is None:
        raise InvalidArgument(f"Invalid hex color: {code!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(digit * 2 for digit in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _ansi256(code: int) -> int:
    if not isinstance(code, int) or not 0 <= code <= 255:
        raise InvalidArgument(f"ANSI 256 color codes must be between 0 and 255, got {code!r}")
    return code


class Chalk:
    """
    An immutable set of terminal styles that can be applied to text.

    Parameters
    ----------
    enabled : bool
        When False, calling the instance returns the text unchanged.
    """

    def __init__(self, enabled: bool = True, _styles: Optional[Dict[str, Any]] = None):
        self._enabled = enabled
        self._styles: Dict[str, Any] = dict(_styles or {})

    def _with(self, **styles: Any) -> "Chalk":
        merged = dict(self._styles)
        merged.update(styles)
        return Chalk(self._enabled, merged)

    def __getattr__(self, name: str) -> "Chalk":
        if name.startswith("_"):
            raise AttributeError(name)
        if name in FOREGROUNDS:
            return self._with(fg=FOREGROUNDS[name])
        if name in BACKGROUNDS:
            return self._with(bg=BACKGROUNDS[name])
        if name in MODIFIERS:
            return self._with(**{MODIFIERS[name]: True})
        raise AttributeError(f"'{type(self).__name__}' has no style named '{name}'")

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def styles(self) -> Dict[str, Any]:
        """The `click.style` keyword arguments this instance applies."""
        return dict(self._styles)

    def set_enabled(self, enabled: bool) -> "Chalk":
        """Return a copy with the same styles, switched on or off."""
        return Chalk(enabled, self._styles)

    def rgb(self, red: int, green: int, blue: int) -> "Chalk":
        return self._with(fg=_rgb(red, green, blue))

    def bg_rgb(self, red: int, green: int, blue: int) -> "Chalk":
        return self._with(bg=_rgb(red, green, blue))

    def hex(self, code: str) -> "Chalk":
        return self._with(fg=_hex(code))

    def bg_hex(self, code: str) -> "Chalk":
        return self._with(bg=_hex(code))

    def ansi256(self, code: int) -> "Chalk":
        return self._with(fg=_ansi256(code))

    def bg_ansi256(self, code: int) -> "Chalk":
        return self._with(bg=_ansi256(code))

    def style(self, text: str) -> str:
        """Apply the styles to a single string."""
        if not self._enabled or not self._styles or text == "":
            return text
        return click.style(text, **self._styles)

    def __call__(self, *texts: Union[str, List[str]]) -> Union[str, List[str]]:
        """
        Style text. A single list is styled piece by piece and returned as a list;
        several strings are joined with a space first.
        """
        if len(texts) == 1 and isinstance(texts[0], list):
            return [self.style(str(piece)) for piece in texts[0]]
        return self.style(" ".join(str(text) for text in texts))

    def __repr__(self) -> str:
        return f"Chalk(enabled={self._enabled}, styles={self._styles})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chalk):
            return NotImplemented
        return self._enabled == other._enabled and self._styles == other._styles

    def __hash__(self) -> int:
        return hash((self._enabled, tuple(sorted(self._styles.items()))))


def strip(text: str) -> str:
    """Remove ANSI styling from a string."""
    return click.unstyle(text)


def from_names(names: List[str], enabled: bool = True) -> Chalk:
    """
    Build a `Chalk` from style names such as ``["blue", "bold"]``.

    Raises `InvalidArgument` for a name that is not a color or modifier.
    """
    instance = Chalk(enabled)
    for name in names:
        if name not in FOREGROUNDS and name not in BACKGROUNDS and name not in MODIFIERS:
            raise InvalidArgument(f"Unknown style: {name}")
        instance = getattr(instance, name)
    return instance


chalk = Chalk()
