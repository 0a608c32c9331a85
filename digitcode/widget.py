"""A digit code input: one single-character field per digit of the code."""

from __future__ import annotations

import html
import logging
import secrets
import string
from collections.abc import Callable, Iterable

from digitcode.control_flags import ControlFlags
from digitcode.digit_code import DigitCode
from digitcode.focus import Document, FocusOffset, FocusResult, focus_offset
from digitcode.profile import DigitCodeProfile, TotpCodeProfile

log = logging.getLogger(__name__)

_ID_PREFIX = "digit-code-edit-"
_ID_RANDOM_LENGTH = 50
_ALPHANUMERIC = string.ascii_letters + string.digits


def generate_id() -> str:
    """A random element id that starts with a letter."""
    suffix = "".join(secrets.choice(_ALPHANUMERIC) for _ in range(_ID_RANDOM_LENGTH))
    return f"{_ID_PREFIX}{suffix}"


def normalize_id(element_id: str) -> str:
    """Prefix an id with ``d-`` if it starts with a digit, since ids must start with a letter."""
    if element_id[:1].isdigit() and element_id[:1] in string.digits:
        log.warning("Your chosen id isn't valid. It needs to start with a letter")
        return f"d-{element_id}"
    return element_id


def _default_submit(code: str) -> None:
    log.info("Default submit method of digit code: %s", code)


class CodeDigitInput:
    """Input for a code of several digits, each entered in its own field.

    ``submit_code`` receives the complete code, either when the last digit is
    filled or when Enter is pressed on a complete code. Assign new
    :class:`ControlFlags` to ``flags`` to request focusing the first digit or
    clearing all digits; they are carried out on the next render once a
    document is available, after ``oninit`` has been called with the id.
    """

    def __init__(
        self,
        profile: DigitCodeProfile | None = None,
        *,
        element_id: str | None = None,
        submit_code: Callable[[str], object] | None = None,
        flags: ControlFlags | None = None,
        classes: str | Iterable[str] = (),
        oninit: Callable[[str], object] | None = None,
        document: Document | None = None,
    ) -> None:
        self.profile: DigitCodeProfile = profile if profile is not None else TotpCodeProfile()
        self.id = normalize_id(element_id if element_id is not None else generate_id())
        self.submit_code = submit_code if submit_code is not None else _default_submit
        self.flags = flags if flags is not None else ControlFlags()
        self.classes = [classes] if isinstance(classes, str) else list(classes)
        self.oninit = oninit
        self.document = document
        self.code = DigitCode(self.profile)
        self.disabled = False
        self._initialized = False

    def __len__(self) -> int:
        return len(self.profile)

    def _focus(self, offset: FocusOffset, index: int) -> FocusResult:
        return focus_offset(self.id, len(self.profile), offset, self.document)(index)

    def focus_next(self, index: int) -> FocusResult:
        """Move focus from digit ``index`` to the following one."""
        return self._focus(FocusOffset.NEXT, index)

    def focus_prev(self, index: int) -> FocusResult:
        """Move focus from digit ``index`` to the preceding one."""
        return self._focus(FocusOffset.PREVIOUS, index)

    def _submit(self, code: str) -> None:
        self.disabled = True
        try:
            self.submit_code(code)
        finally:
            self.disabled = False

    def set_value(self, index: int, value: str | None) -> None:
        """Store a digit (or None) and submit if the last digit completes the code.

        A value the profile rejects, or an index outside the code, leaves the
        digits unchanged.
        """
        log.debug("%d called set_value with %r", index, value)
        updated = self.code.with_set(index, value)
        updated.bump_update_indicator()
        self.code = updated
        if index == len(updated) - 1:
            code = updated.joined()
            if code is not None:
                self._submit(code)
        log.debug("%d call to set_value produced %r", index, updated)

    def enter_hit(self, index: int) -> None:
        """Submit the code if it is complete and valid."""
        log.debug("Enter hit on %d: %r", index, self.code)
        code = self.code.joined()
        if code is not None:
            self._submit(code)

    def handle_input(self, index: int, value: str) -> None:
        """React to the text of field ``index`` changing to ``value``."""
        char = value if self.profile.is_valid_char(value) else None
        self.set_value(index, char)
        if char is not None:
            self.focus_next(index)

    def handle_keydown(self, index: int, key: str) -> bool:
        """React to a key press in field ``index``; return True if the default action is prevented."""
        log.debug("Keydown: %s", key)
        if key == "ArrowLeft":
            self.focus_prev(index)
        elif key == "ArrowRight":
            self.focus_next(index)
        elif key == "Enter":
            self.enter_hit(index)
        elif key == "Backspace":
            self.set_value(index, None)
            self.focus_prev(index)
            return True
        elif self.profile.is_valid_char(key):
            self.set_value(index, None)
        return False

    def process_flags(self) -> None:
        """Initialise once a document exists, then carry out and reset pending flags."""
        if not self._initialized:
            if self.document is None:
                return
            self._initialized = True
            log.debug('Init complete: id="%s"', self.id)
            if self.oninit is not None:
                self.oninit(self.id)

        builder = self.flags.change()
        if builder.focus is not None:
            focus_num = builder.focus
            builder = builder.unset_focus()
            if focus_num == 0:
                self.focus_prev(1)
            else:
                self.focus_next(focus_num - 1)
        if builder.apply().clear:
            builder = builder.unset_clear()
            self.code = self.code.as_empty()
        new_flags = builder.apply()
        if new_flags != self.flags:
            self.flags = new_flags

    def _render_digit(self, index: int) -> str:
        value = self.code.get(index) or ""
        disabled = " disabled" if self.disabled else ""
        return (
            f'<input type="text" maxlength="1" '
            f'inputmode="{html.escape(self.profile.input_mode(index))}"{disabled} '
            f'value="{html.escape(value)}" data-index="{index}"/>'
        )

    def render(self) -> str:
        """Process pending flags and return the HTML of the input."""
        self.process_flags()
        class_attr = " ".join(["nice-digit-code-container-view", *self.classes])
        digits = "".join(self._render_digit(index) for index in range(len(self.profile)))
        return (
            f'<div class="{html.escape(class_attr)}" id="{html.escape(self.id)}" '
            f'code_length="{len(self.profile)}">'
            f'<div class="digit-code-container">{digits}</div>'
            f"</div>"
        )


def totp_input(length: int = 6, **kwargs) -> CodeDigitInput:
    """A :class:`CodeDigitInput` for a numeric TOTP code of ``length`` digits."""
    return CodeDigitInput(TotpCodeProfile(length), **kwargs)