"""Tokenizer for SVG path data: numbers, single-digit flags and separators."""

from __future__ import annotations

import math
from typing import Optional

from svgpathdata.common import SVG_SEPARATORS

_DIGITS = "0123456789"


class PathDataScanner:
    """
    Cursor over a path-data string.

    A scanner is created per parse call. Reading a token that is not there
    returns None and leaves the cursor where it was; the scanner never raises.

    Number grammar:
        [sign] digits [ "." digits ] [ ("e"|"E") [sign] digits ]
        [sign] "." digits [ ("e"|"E") [sign] digits ]
    The exponent is only consumed if at least one exponent digit follows,
    so "1e" reads as the number 1 followed by "e".
    """

    def __init__(self, text: str, position: int = 0):
        self._text = text
        self._pos = position

    @property
    def text(self) -> str:
        """The scanned path data."""
        return self._text

    @property
    def position(self) -> int:
        """Index of the next unread character."""
        return self._pos

    @property
    def at_end(self) -> bool:
        """True if all characters have been consumed."""
        return self._pos >= len(self._text)

    def peek(self) -> Optional[str]:
        """The next unread character, None at the end."""
        if self.at_end:
            return None
        return self._text[self._pos]

    def advance(self) -> None:
        """Consume one character."""
        if not self.at_end:
            self._pos += 1

    def rewind(self, position: int) -> None:
        """Move the cursor back to an earlier _position_ (an incomplete parameter group)."""
        self._pos = min(position, self._pos)

    def skip_separators(self) -> None:
        """Consume a run of whitespace and commas."""
        text = self._text
        pos = self._pos
        while pos < len(text) and text[pos] in SVG_SEPARATORS:
            pos += 1
        self._pos = pos

    def _skip_digits(self, pos: int) -> int:
        text = self._text
        while pos < len(text) and text[pos] in _DIGITS:
            pos += 1
        return pos

    def next_number(self) -> Optional[float]:
        """
        Read a number starting at the cursor.

        Returns:
            Optional[float]: the number, or None (cursor unmoved) if no finite
                number starts at the cursor
        """
        text = self._text
        start = self._pos
        pos = start

        # Optional sign
        if pos < len(text) and text[pos] in "+-":
            pos += 1

        # Mantissa: digits, optional "." and fraction digits; needs one digit at least
        int_end = self._skip_digits(pos)
        mantissa_digits = int_end - pos
        pos = int_end
        if pos < len(text) and text[pos] == ".":
            frac_end = self._skip_digits(pos + 1)
            if mantissa_digits > 0 or frac_end > pos + 1:
                mantissa_digits += frac_end - (pos + 1)
                pos = frac_end
        if mantissa_digits == 0:
            return None

        # Exponent
        if pos < len(text) and text[pos] in "eE":
            exp_pos = pos + 1
            if exp_pos < len(text) and text[exp_pos] in "+-":
                exp_pos += 1
            exp_end = self._skip_digits(exp_pos)
            if exp_end > exp_pos:
                pos = exp_end

        value = float(text[start:pos])
        if not math.isfinite(value):
            return None
        self._pos = pos
        return value

    def next_flag(self) -> Optional[bool]:
        """
        Read a single-character arc flag ("0" or "1") at the cursor.

        Returns:
            Optional[bool]: the flag, or None (cursor unmoved) for any other character
        """
        char = self.peek()
        if char == "0":
            self._pos += 1
            return False
        if char == "1":
            self._pos += 1
            return True
        return None
