"""Balance engine and ledger projector.

Both are pure functions of a chart of accounts and a sequence of transactions:

- `compute_balances` walks all transactions and applies the sign convention
  from `razao.base.SIGNS` to each debit and credit leg,
- `project` yields the running ledger of a single account in date order.

Nothing here mutates its inputs or keeps state between calls,
so repeated calls on the same snapshot give equal results.
"""

import datetime
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator, Sequence

from .base import SIGNS, AccountType
from .chart import Account
from .entry import Transaction
from .report import ReportDict

logger = logging.getLogger(__name__)


class Balances(ReportDict):
    """Signed balance by account id, in chart order."""


def index(accounts: Iterable[Account]) -> dict[str, Account]:
    return {account.id: account for account in accounts}


def delta(accounts: Iterable[Account], t: Transaction) -> dict[str, Decimal]:
    """Signed change of account balances caused by a single transaction.

    A leg with an account id missing from *accounts* makes no change.
    """
    return _delta(index(accounts), t)


def debit_view(accounts: Iterable[Account], t: Transaction) -> dict[str, Decimal]:
    """Change caused by *t* with debits positive and credits negative.

    Balances carry normal-balance signs, so a debit to an asset and
    a credit to income both show as increases in `delta`. Turning every
    change back to debit-positive terms makes the two legs cancel out.
    """
    lookup = index(accounts)
    return {
        account_id: change * SIGNS[lookup[account_id].type].debit
        for account_id, change in _delta(lookup, t).items()
    }


def _delta(lookup: dict[str, Account], t: Transaction) -> dict[str, Decimal]:
    result: dict[str, Decimal] = {}
    if account := lookup.get(t.debit_account_id):
        change = SIGNS[account.type].debit * t.value
        result[account.id] = result.get(account.id, Decimal(0)) + change
    else:
        logger.warning(
            "Transaction %s: debit account %s not found, leg skipped.",
            t.id,
            t.debit_account_id,
        )
    if account := lookup.get(t.credit_account_id):
        change = SIGNS[account.type].credit * t.value
        result[account.id] = result.get(account.id, Decimal(0)) + change
    else:
        logger.warning(
            "Transaction %s: credit account %s not found, leg skipped.",
            t.id,
            t.credit_account_id,
        )
    return result


def compute_balances(
    accounts: Iterable[Account], transactions: Iterable[Transaction]
) -> Balances:
    """Return balances for every account, zero for accounts with no activity."""
    lookup = index(accounts)
    balances = Balances({account_id: Decimal(0) for account_id in lookup})
    count = 0
    for t in transactions:
        for account_id, change in _delta(lookup, t).items():
            balances[account_id] += change
        count += 1
    logger.debug("Computed %d balances from %d transactions.", len(balances), count)
    return balances


@dataclass(frozen=True)
class LedgerEntry:
    transaction_id: str
    date: datetime.date
    history: str
    debit: Decimal
    credit: Decimal
    balance: Decimal


@dataclass(frozen=True)
class Projection(Iterable[LedgerEntry]):
    """Running ledger of one account.

    Iteration is lazy and may be repeated, every pass starts from zero balance.
    Transactions with equal dates keep the order of the input sequence.
    """

    account_id: str
    account_type: AccountType | None
    transactions: Sequence[Transaction] = ()

    def __iter__(self) -> Iterator[LedgerEntry]:
        if self.account_type is None:
            return
        side = SIGNS[self.account_type]
        qualifying = [t for t in self.transactions if t.touches(self.account_id)]
        balance = Decimal(0)
        for t in sorted(qualifying, key=lambda t: t.date):
            debit = t.value if t.debit_account_id == self.account_id else Decimal(0)
            credit = t.value if t.credit_account_id == self.account_id else Decimal(0)
            balance += side.debit * debit + side.credit * credit
            yield LedgerEntry(t.id, t.date, t.history, debit, credit, balance)

    def to_list(self) -> list[LedgerEntry]:
        return list(self)

    @property
    def final_balance(self) -> Decimal:
        balance = Decimal(0)
        for entry in self:
            balance = entry.balance
        return balance


def project(
    account: Account | None, transactions: Iterable[Transaction], account_id: str = ""
) -> Projection:
    """Create running ledger for *account*.

    For an unknown account pass `None` and the requested *account_id*,
    the result is an empty projection with no account type.
    """
    snapshot = tuple(transactions)
    if account is None:
        return Projection(account_id, None, snapshot)
    return Projection(account.id, account.type, snapshot)
