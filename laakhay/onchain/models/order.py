"""Decoded order data models."""

from __future__ import annotations

from eth_utils import to_checksum_address
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Order(BaseModel):
    """Standing order held by the exchange contract.

    Token fields are the exchange's uint16 token ids. Amounts are kept as
    plain ints since they are uint128/uint256 on chain.
    """

    user: str
    sell_token_balance: int = Field(..., ge=0)
    buy_token: int = Field(..., ge=0)
    sell_token: int = Field(..., ge=0)
    valid_from: int = Field(..., ge=0)
    valid_until: int = Field(..., ge=0)
    price_numerator: int = Field(..., ge=0)
    price_denominator: int = Field(..., ge=0)
    used_amount: int = Field(..., ge=0)

    @field_validator("user")
    @classmethod
    def validate_user(cls, v: str) -> str:
        """Normalize owner address to its checksum form."""
        return to_checksum_address(v)

    @property
    def remaining_amount(self) -> int:
        """Sell amount still available (denominator minus used amount)."""
        return self.price_denominator - self.used_amount

    def is_valid_at(self, batch_id: int) -> bool:
        """Check whether the order is active in the given batch."""
        return self.valid_from <= batch_id <= self.valid_until

    model_config = ConfigDict(frozen=True)


class IndexedOrder(Order):
    """Order plus its position in the owner's order list."""

    order_id: int = Field(..., ge=0)
