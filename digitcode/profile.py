"""Profiles describing the length and alphabet of a digit code."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

import regex

_GRAPHEME = regex.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


class DigitCodeProfile(ABC):
    """A code with a fixed number of digits drawn from a fixed alphabet."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of digits in the code."""

    @abstractmethod
    def char_matches_alphabet(self, char: str) -> bool:
        """Whether a single grapheme belongs to the alphabet."""

    def is_valid_char(self, char: str) -> bool:
        """Whether the text is exactly one grapheme from the alphabet."""
        return len(split_graphemes(char)) == 1 and self.char_matches_alphabet(char)

    def input_mode(self, index: int) -> str:
        """HTML input mode for the digit at ``index``."""
        return "text"

    def is_char_code_valid(self, chars: Iterable[str]) -> bool:
        """Whether every item is a valid char and the count equals the code length."""
        count = 0
        for char in chars:
            count += 1
            if not self.is_valid_char(char):
                return False
        return count == len(self)

    def is_str_code_valid(self, code: str) -> bool:
        """Whether a whole string is a valid code of this profile."""
        return self.is_char_code_valid(split_graphemes(code))

    def valid_char_code(self, chars: Iterable[str]) -> str | None:
        """Join already split chars into a code, or return None if they are not valid."""
        chars = list(chars)
        if self.is_char_code_valid(chars):
            return "".join(chars)
        return None


@dataclass(frozen=True)
class TotpCodeProfile(DigitCodeProfile):
    """A numeric TOTP code; six digits unless told otherwise."""

    length: int = 6

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"code length must not be negative, got {self.length}")

    def __len__(self) -> int:
        return self.length

    def char_matches_alphabet(self, char: str) -> bool:
        return char in "0123456789"

    def input_mode(self, index: int) -> str:
        return "numeric"