"""Read access to the wallet ledger (append‑only, newest first)."""

from typing import Mapping

from ..core.query import Page, PageParams, run_query
from ..core.store import WALLET_LEDGER, DataStore
from ..schemas.wallet import WalletLedgerEntry

LEDGER_FILTERS = ("userId", "type")


class WalletService:
    @classmethod
    async def list_entries(
        cls,
        store: DataStore,
        params: Mapping[str, str],
        paging: PageParams,
    ) -> Page[WalletLedgerEntry]:
        return run_query(store.all(WALLET_LEDGER), params, paging, LEDGER_FILTERS, time_series=True)
