"""Page aggregation."""

from __future__ import annotations

from collections.abc import AsyncIterable, Sequence
from typing import Any

from ..models import IndexedPage


async def collect_pages(pages: AsyncIterable[IndexedPage | Sequence[Any]]) -> list[Any]:
    """Drain a page stream into one flat list.

    Elements keep their order within each page and pages keep their emission
    order. Errors raised by the stream propagate and the partial list is
    dropped.
    """
    collected: list[Any] = []
    async for page in pages:
        if isinstance(page, IndexedPage):
            collected.extend(page.elements)
        else:
            collected.extend(page)
    return collected
