"""Page model for the indexed order book protocol."""

from __future__ import annotations

from eth_utils import to_checksum_address
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .order import IndexedOrder


class IndexedPage(BaseModel):
    """One decoded page of the open order book.

    The continuation fields are reported by the viewer contract and are the
    exact cursor for the next call.
    """

    elements: tuple[IndexedOrder, ...] = ()
    has_next_page: bool
    next_page_user: str
    next_page_user_offset: int = Field(..., ge=0)

    @field_validator("next_page_user")
    @classmethod
    def validate_next_page_user(cls, v: str) -> str:
        return to_checksum_address(v)

    def __len__(self) -> int:
        return len(self.elements)

    model_config = ConfigDict(frozen=True)
