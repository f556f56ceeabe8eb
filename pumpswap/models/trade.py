"""Pydantic models and value objects for trade requests and results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator
from solders.instruction import Instruction

from pumpswap.addresses import Address
from pumpswap.constants import BPS_DENOMINATOR

# Slippage tolerance in basis points
BasisPoints = Annotated[int, Field(ge=0, le=BPS_DENOMINATOR, strict=True)]


class TradeSide(str, Enum):
    """Direction of a trade from the trader's point of view."""

    BUY = "buy"
    SELL = "sell"


class BuyParams(BaseModel):
    """Buy `mint` tokens by spending `sol_amount` SOL."""

    model_config = ConfigDict(frozen=True)

    mint: Address
    user: Address
    sol_amount: float = Field(gt=0)
    slippage_bps: BasisPoints | None = None


class SellParams(BaseModel):
    """Sell an exact token amount or a percentage of the wallet balance.

    Exactly one of `exact_amount` and `percentage` should be set; when
    neither is given the whole balance is sold.
    """

    model_config = ConfigDict(frozen=True)

    mint: Address
    user: Address
    exact_amount: float | None = Field(default=None, gt=0)
    percentage: float | None = Field(default=None, gt=0, le=100)
    slippage_bps: BasisPoints | None = None

    @model_validator(mode="after")
    def _check_amount_mode(self) -> SellParams:
        if self.exact_amount is not None and self.percentage is not None:
            raise ValueError("Specify either exact_amount or percentage, not both")
        return self


class TransactionResult(BaseModel):
    """Outcome of submitting a transaction."""

    success: bool
    signature: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, signature: str) -> TransactionResult:
        return cls(success=True, signature=signature)

    @classmethod
    def failed(cls, error: str) -> TransactionResult:
        return cls(success=False, error=error)


@dataclass(frozen=True)
class TradeQuote:
    """One quote computation against a specific pool.

    All amounts are raw integer units. `bounded_amount` is the minimum
    acceptable receipt after slippage tolerance.
    """

    side: TradeSide
    pool_address: str
    amount_in: int
    ideal_amount: int
    bounded_amount: int
    slippage_bps: int


@dataclass(frozen=True)
class PreparedTrade:
    """A bounded quote plus the instructions that execute it."""

    quote: TradeQuote
    instructions: list[Instruction]
    description: str
