"""Pydantic model for wallet ledger entries."""

from pydantic import Field

from .entity import Entity


class WalletLedgerEntry(Entity):
    user_id: str = Field(..., alias="userId", examples=["user-1"])
    type: str = Field(..., examples=["credit"])
