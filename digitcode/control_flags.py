"""Command flags that steer a digit code input from the outside."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ControlFlags:
    """Commands for the input: which digit to focus and whether to clear all digits.

    Use :meth:`change` to get a builder, edit it and call ``apply`` to get new flags.
    """

    focus: int | None = None
    clear: bool = False

    def change(self) -> ControlFlagsBuilder:
        """Return a builder that starts from the current flags."""
        return ControlFlagsBuilder(focus=self.focus, clear=self.clear)


@dataclass
class ControlFlagsBuilder:
    """Mutable builder for :class:`ControlFlags`; every method returns the builder."""

    focus: int | None = None
    clear: bool = False

    def focus_first(self) -> ControlFlagsBuilder:
        """Request focus on the first digit."""
        self.focus = 0
        return self

    def unset_focus(self) -> ControlFlagsBuilder:
        """Drop any focus request."""
        self.focus = None
        return self

    def clear(self) -> ControlFlagsBuilder:  # type: ignore[override]
        """Request that all digits are cleared."""
        self.__dict__["clear"] = True
        return self

    def unset_clear(self) -> ControlFlagsBuilder:
        """Drop the clear request."""
        self.__dict__["clear"] = False
        return self

    def apply(self) -> ControlFlags:
        """Build the flags for the current configuration."""
        return ControlFlags(focus=self.focus, clear=self.__dict__["clear"])