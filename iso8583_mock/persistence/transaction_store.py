"""In-memory store of approved authorizations, keyed by STAN."""

from __future__ import annotations

import threading

from iso8583_mock.domain.models.transaction import Transaction


class TransactionStore:
    """Lock-guarded STAN -> Transaction mapping.

    Shared by every request handler. Only point operations are exposed;
    each one holds the lock for a single dict access and never does I/O
    while holding it. Entries live for the lifetime of the process.
    """

    def __init__(self) -> None:
        self._transactions: dict[str, Transaction] = {}
        self._lock = threading.Lock()

    def put(self, stan: str, transaction: Transaction) -> None:
        """Insert or overwrite the entry for ``stan``."""
        with self._lock:
            self._transactions[stan] = transaction

    def exists(self, stan: str) -> bool:
        """Return whether an entry for ``stan`` is present."""
        with self._lock:
            return stan in self._transactions

    def get(self, stan: str) -> Transaction | None:
        with self._lock:
            return self._transactions.get(stan)

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)
