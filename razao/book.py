"""User-facing Book class that owns the list of transactions."""

import logging
import secrets
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from pydantic import RootModel

from .base import RazaoError, SaveLoadMixin, UnknownAccountReference
from .chart import Chart
from .config import Settings, configure_logging
from .entry import Entry, Transaction
from .ledger import Balances, Projection, compute_balances, project
from .report import BalanceSheet, Dashboard, IncomeStatement

logger = logging.getLogger(__name__)

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 9


def new_id(existing: Iterable[str] = ()) -> str:
    """Random lowercase base36 id that is not in *existing*."""
    taken = set(existing)
    while True:
        candidate = "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
        if candidate not in taken:
            return candidate


class Journal(RootModel[list[Transaction]], SaveLoadMixin):
    """Flat list of transactions saved to JSON, most recent first."""

    @property
    def duplicates(self) -> list[str]:
        """Duplicate transaction ids. Must be empty for valid journal."""
        ids = [t.id for t in self.root]
        for transaction_id in set(ids):
            ids.remove(transaction_id)
        return ids

    def assert_transaction_ids_are_unique(self):
        if ds := self.duplicates:
            raise RazaoError(f"Transaction ids are not unique: {ds}")

    def __iter__(self):
        return iter(self.root)

    def __len__(self):
        return len(self.root)


@dataclass
class Book:
    chart: Chart = field(default_factory=Chart.default)
    transactions: list[Transaction] = field(default_factory=list)
    strict: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "Book":
        configure_logging(settings.log_level)
        chart = Chart.load(settings.chart_path) if settings.chart_path else None
        if settings.journal_path.exists():
            return cls.load(settings.journal_path, chart, settings.strict)
        if chart is None:
            chart = Chart.default()
        return cls(chart=chart, strict=settings.strict)

    def check_references(self, t: Transaction):
        """Raise error if strict and any leg of *t* is not in the chart."""
        if not self.strict:
            return
        for account_id in t.accounts:
            if account_id not in self.chart:
                raise UnknownAccountReference(account_id)

    def post(self, entry: Entry) -> Transaction:
        """Add new transaction in front of the list."""
        t = entry.to_transaction(new_id(x.id for x in self.transactions))
        self.check_references(t)
        self.transactions.insert(0, t)
        logger.info(
            "Posted %s: %s from %s to %s",
            t.id,
            t.value,
            t.credit_account_id,
            t.debit_account_id,
        )
        return t

    def post_many(self, entries: Iterable[Entry]) -> list[Transaction]:
        return [self.post(entry) for entry in entries]

    def delete(self, transaction_id: str) -> Transaction:
        for i, t in enumerate(self.transactions):
            if t.id == transaction_id:
                del self.transactions[i]
                logger.info("Deleted %s", transaction_id)
                return t
        raise RazaoError(f"Transaction {transaction_id} not found.")

    def snapshot(self) -> tuple[Transaction, ...]:
        """Immutable copy of transactions in insertion order, oldest first."""
        return tuple(reversed(self.transactions))

    def unresolved(self) -> list[Transaction]:
        """Transactions with at least one leg outside of the chart."""
        return [
            t
            for t in self.snapshot()
            if any(account_id not in self.chart for account_id in t.accounts)
        ]

    @property
    def balances(self) -> Balances:
        return compute_balances(self.chart.accounts, self.snapshot())

    @property
    def balance_sheet(self) -> BalanceSheet:
        sheet = BalanceSheet.new(self.chart, self.balances)
        if not sheet.is_balanced():
            logger.warning(
                "Books out of balance: assets %s, liabilities, equity and result %s",
                sheet.total_assets,
                sheet.reconciliation,
            )
        return sheet

    @property
    def income_statement(self) -> IncomeStatement:
        return IncomeStatement.new(self.chart, self.balances)

    @property
    def dashboard(self) -> Dashboard:
        return Dashboard.new(self.chart, self.balances, list(self.transactions))

    def ledger(self, account_id: str) -> Projection:
        return project(self.chart.get(account_id), self.snapshot(), account_id)

    def save(self, path: str | Path, allow_overwrite: bool = False):
        Journal(list(self.transactions)).save(path, allow_overwrite)
        logger.info("Saved %d transactions to %s", len(self.transactions), path)

    @classmethod
    def load(
        cls, path: str | Path, chart: Chart | None = None, strict: bool = False
    ) -> "Book":
        journal = Journal.load(path)
        journal.assert_transaction_ids_are_unique()
        if chart is None:
            chart = Chart.default()
        book = cls(chart=chart, strict=strict)
        for t in journal:
            book.check_references(t)
        book.transactions = list(journal)
        logger.info("Loaded %d transactions from %s", len(journal), path)
        return book
