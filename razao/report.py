"""Financial statements composed from account balances.

- `BalanceSheet` shows assets against liabilities, equity and
  the net result of the period that is not yet closed to equity,
- `IncomeStatement` (DRE) shows income less expenses,
- `Dashboard` is a short summary for the home screen.
"""

from collections import UserDict
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Mapping

import simplejson as json  # type: ignore

from .base import AccountType, SaveLoadMixin

if TYPE_CHECKING:
    from .chart import Chart
    from .entry import Transaction


class ReportDict(UserDict[str, Decimal], SaveLoadMixin):
    @property
    def total(self) -> Decimal:
        return Decimal(sum(self.data.values()))

    def model_dump_json(self, indent: int = 2, **_):
        return json.dumps(self.data, indent=indent)

    @classmethod
    def model_validate_json(cls, text: str):
        return cls(json.loads(text, use_decimal=True))


@dataclass
class Reporter:
    chart: "Chart"
    balances: Mapping[str, Decimal]

    def balance(self, account_id: str) -> Decimal:
        return Decimal(self.balances.get(account_id, 0))

    def fill(self, t: AccountType) -> ReportDict:
        """Return balances for accounts of a given type."""
        return ReportDict(
            {account.id: self.balance(account.id) for account in self.chart.by_type(t)}
        )


class Report:
    """Base class for financial reports."""

    def to_dict(self) -> dict:
        return {
            key: dict(value) if isinstance(value, ReportDict) else value
            for key, value in vars(self).items()
        }

    def model_dump_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=str)


class Outcome(Enum):
    Surplus = "Superávit"
    Deficit = "Déficit"

    @classmethod
    def of(cls, net_result: Decimal) -> "Outcome":
        return cls.Surplus if net_result >= 0 else cls.Deficit


@dataclass
class IncomeStatement(Report):
    income: ReportDict
    expenses: ReportDict

    @classmethod
    def new(cls, chart: "Chart", balances: Mapping[str, Decimal]):
        reporter = Reporter(chart, balances)
        return cls(
            income=reporter.fill(AccountType.Income),
            expenses=reporter.fill(AccountType.Expense),
        )

    @property
    def total_income(self) -> Decimal:
        return self.income.total

    @property
    def total_expenses(self) -> Decimal:
        return self.expenses.total

    @property
    def net_result(self) -> Decimal:
        """Calculate net result as income less expenses."""
        return self.total_income - self.total_expenses

    @property
    def outcome(self) -> Outcome:
        return Outcome.of(self.net_result)

    def to_dict(self) -> dict:
        return super().to_dict() | dict(
            total_income=self.total_income,
            total_expenses=self.total_expenses,
            net_result=self.net_result,
            outcome=self.outcome.value,
        )


@dataclass
class BalanceSheet(Report):
    assets: ReportDict
    liabilities: ReportDict
    equity: ReportDict
    net_result: Decimal = Decimal(0)

    @classmethod
    def new(cls, chart: "Chart", balances: Mapping[str, Decimal]):
        reporter = Reporter(chart, balances)
        return cls(
            assets=reporter.fill(AccountType.Asset),
            liabilities=reporter.fill(AccountType.Liability),
            equity=reporter.fill(AccountType.Equity),
            net_result=IncomeStatement.new(chart, balances).net_result,
        )

    @property
    def total_assets(self) -> Decimal:
        return self.assets.total

    @property
    def total_liabilities(self) -> Decimal:
        return self.liabilities.total

    @property
    def total_equity(self) -> Decimal:
        return self.equity.total

    @property
    def reconciliation(self) -> Decimal:
        """Liabilities plus equity plus net result, must equal total assets."""
        return self.total_liabilities + self.total_equity + self.net_result

    @property
    def net_worth(self) -> Decimal:
        return self.total_assets - self.total_liabilities

    def is_balanced(self) -> bool:
        return self.total_assets == self.reconciliation

    def to_dict(self) -> dict:
        return super().to_dict() | dict(
            total_assets=self.total_assets,
            total_liabilities=self.total_liabilities,
            total_equity=self.total_equity,
            reconciliation=self.reconciliation,
            is_balanced=self.is_balanced(),
        )


@dataclass
class Dashboard(Report):
    total_assets: Decimal
    total_liabilities: Decimal
    net_result: Decimal
    asset_composition: ReportDict
    top_expenses: ReportDict
    recent: list["Transaction"] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        chart: "Chart",
        balances: Mapping[str, Decimal],
        transactions: Iterable["Transaction"] = (),
        limit: int = 5,
    ):
        """Summarise balances, *transactions* are expected most recent first."""
        sheet = BalanceSheet.new(chart, balances)
        expenses = IncomeStatement.new(chart, balances).expenses
        positive_expenses = [(k, v) for k, v in expenses.items() if v > 0]
        positive_expenses.sort(key=lambda pair: pair[1], reverse=True)
        recent = []
        for t in transactions:
            if len(recent) == limit:
                break
            recent.append(t)
        return cls(
            total_assets=sheet.total_assets,
            total_liabilities=sheet.total_liabilities,
            net_result=sheet.net_result,
            asset_composition=ReportDict(
                {k: v for k, v in sheet.assets.items() if v > 0}
            ),
            top_expenses=ReportDict(dict(positive_expenses[:limit])),
            recent=recent,
        )

    @property
    def net_worth(self) -> Decimal:
        return self.total_assets - self.total_liabilities

    @property
    def outcome(self) -> Outcome:
        return Outcome.of(self.net_result)

    def to_dict(self) -> dict:
        return super().to_dict() | dict(
            recent=[t.model_dump(mode="json", by_alias=True) for t in self.recent],
            net_worth=self.net_worth,
            outcome=self.outcome.value,
        )
