"""Argument checks shared by the readers."""

from __future__ import annotations

from .exceptions import InvalidArgumentError


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_page_size(page_size: int) -> None:
    """Reject page sizes that cannot make progress."""
    if not _is_int(page_size) or page_size <= 0:
        raise InvalidArgumentError(f"page_size must be a positive int, got {page_size!r}")


def validate_block_number(block_number: int | None) -> None:
    """Reject snapshot heights that are not None or a non-negative int."""
    if block_number is None:
        return
    if not _is_int(block_number) or block_number < 0:
        raise InvalidArgumentError(
            f"block_number must be a non-negative int, got {block_number!r}"
        )
