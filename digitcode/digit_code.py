"""State of a partially entered digit code."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from digitcode.profile import DigitCodeProfile

_INDICATOR_MODULUS = (2**63 - 1) - 10


@dataclass
class DigitCode:
    """The digits entered so far, one optional grapheme per position."""

    profile: DigitCodeProfile
    update_indicator: int = 0
    _code: list[str | None] = field(init=False, repr=True)

    def __post_init__(self) -> None:
        self._code = [None] * len(self.profile)

    def _copy(self) -> DigitCode:
        other = DigitCode(self.profile, self.update_indicator)
        other._code = list(self._code)
        return other

    def set(self, index: int, value: str | None) -> None:
        """Store ``value`` at ``index``; None empties the position.

        Raises IndexError for a position outside the code and ValueError for a
        value that is not a valid char of the profile.
        """
        if not 0 <= index < len(self._code):
            raise IndexError(f"digit index {index} out of range")
        if value is not None and not self.profile.is_valid_char(value):
            raise ValueError(f"{value!r} is not a valid digit for this code")
        self._code[index] = value

    def get(self, index: int) -> str | None:
        """Value at ``index``, or None if empty or out of range."""
        if 0 <= index < len(self._code):
            return self._code[index]
        return None

    def __len__(self) -> int:
        return len(self.profile)

    def __iter__(self) -> Iterator[str | None]:
        return iter(self._code)

    def clear(self) -> None:
        """Empty every position."""
        self._code = [None] * len(self._code)

    def as_empty(self) -> DigitCode:
        """A copy with every position emptied."""
        other = self._copy()
        other.clear()
        return other

    def with_set(self, index: int, value: str | None) -> DigitCode:
        """A copy with ``value`` stored at ``index``; unchanged if it cannot be stored."""
        other = self._copy()
        try:
            other.set(index, value)
        except (IndexError, ValueError):
            pass
        return other

    def iter_some(self) -> Iterator[str]:
        """The filled positions in order."""
        return (value for value in self._code if value is not None)

    def joined(self) -> str | None:
        """The whole code as a string, or None if it is not complete and valid."""
        if self.is_valid():
            return "".join(self.iter_some())
        return None

    def is_valid(self) -> bool:
        """Whether the filled positions form a valid code of the profile."""
        return self.profile.is_char_code_valid(self.iter_some())

    def bump_update_indicator(self) -> None:
        """Change the update indicator so the state compares as changed."""
        self.update_indicator = (self.update_indicator + 1) % _INDICATOR_MODULUS