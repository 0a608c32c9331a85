"""Moving keyboard focus between the digit inputs."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any, Protocol

log = logging.getLogger(__name__)


class Document(Protocol):
    """Anything that can look up elements by CSS selector."""

    def query_selector(self, selector: str) -> Any: ...


class FocusResult(enum.Enum):
    """Outcome of a focus move."""

    OK = "ok"
    TOO_BIG = "too_big"
    TOO_LOW = "too_low"
    NO_DOCUMENT = "no_document"


class FocusError(Exception):
    """A focus move that would leave the range of digits."""

    def __init__(self, result: FocusResult) -> None:
        super().__init__(result.value)
        self.result = result


class FocusOffset(enum.Enum):
    """Direction of a focus move."""

    NEXT = "next"
    PREVIOUS = "previous"

    def process(self, current: int, maximum: int) -> int:
        """Index after moving one step from ``current``; ``maximum`` is the last index.

        Raises FocusError with TOO_BIG or TOO_LOW at the ends.
        """
        if self is FocusOffset.NEXT:
            if current == maximum:
                raise FocusError(FocusResult.TOO_BIG)
            return current + 1
        if current == 0:
            raise FocusError(FocusResult.TOO_LOW)
        return current - 1


def focus_offset(
    element_id: str,
    element_count: int,
    offset: FocusOffset,
    document: Document | None,
) -> Callable[[int], FocusResult]:
    """Build a function that moves focus from a given digit index by ``offset``."""
    if element_count < 1:
        raise ValueError("a digit code needs at least one element")
    last = element_count - 1

    def move(index: int) -> FocusResult:
        log.debug(
            "Focus offset is called: %s, index=%d total=%d", offset, index, element_count
        )
        try:
            target = offset.process(index, last)
        except FocusError as exc:
            return exc.result

        if document is None:
            log.error(
                "The focus method was called before a document was ready; the call is ignored."
            )
            return FocusResult.NO_DOCUMENT

        selector = f'#{element_id} input[data-index="{target}"]'
        try:
            node = document.query_selector(selector)
        except Exception:
            log.exception("An error occurred while focussing a node")
            return FocusResult.NO_DOCUMENT
        if node is None:
            log.error("An error occurred while focussing a node: nothing matches %s", selector)
            return FocusResult.NO_DOCUMENT

        focus = getattr(node, "focus", None)
        if callable(focus):
            try:
                focus()
            except Exception:
                log.debug("Focusing %s failed", selector, exc_info=True)
        return FocusResult.OK

    return move