import datetime
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from .base import Numeric, RazaoError


class Transaction(BaseModel):
    """Double-entry transaction: one debit leg and one credit leg of equal value."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    date: datetime.date
    value: Decimal = Field(gt=0)
    history: str = Field(min_length=1)
    debit_account_id: str
    credit_account_id: str

    @property
    def accounts(self) -> tuple[str, str]:
        return self.debit_account_id, self.credit_account_id

    def touches(self, account_id: str) -> bool:
        return account_id in self.accounts

    @field_serializer("value", when_used="json")
    def serialize_value(self, value: Decimal) -> int | float | str:
        """Write value as a JSON number, as a string only if a float would round it."""
        if value == value.to_integral_value():
            return int(value)
        if Decimal(str(float(value))) == value:
            return float(value)
        return str(value)


@dataclass
class Entry:
    """User interface for creating a transaction before it gets an id.

    Example:

        Entry("Salary").on("2024-05-05").amount(1000).debit("a2").credit("r1")
    """

    history: str
    date: datetime.date | None = None
    debit_account_id: str | None = None
    credit_account_id: str | None = None
    _amount: Decimal | None = None

    def on(self, date: datetime.date | str):
        """Set entry date, accepts ISO strings like `2024-05-05`."""
        if isinstance(date, str):
            date = datetime.date.fromisoformat(date)
        self.date = date
        return self

    def amount(self, amount: Numeric):
        """Set amount for the entry."""
        try:
            value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
        except (InvalidOperation, TypeError, ValueError):
            raise RazaoError(f"Amount is not a number: {amount!r}.")
        if not value.is_finite():
            raise RazaoError(f"Amount must be finite, got {amount}.")
        if value <= 0:
            raise RazaoError(f"Amount must be positive, got {amount}.")
        self._amount = value
        return self

    def get_amount(self, amount: Numeric | None = None) -> Decimal:
        """Use provided amount, default amount or raise error if no data about amount."""
        if amount is not None:
            self.amount(amount)
        if self._amount is None:
            raise RazaoError("Amount is not set.")
        return self._amount

    def debit(self, account_id: str, amount: Numeric | None = None):
        if self.debit_account_id is not None:
            raise RazaoError("Entry already has a debit account.")
        self.get_amount(amount)
        self.debit_account_id = account_id
        return self

    def credit(self, account_id: str, amount: Numeric | None = None):
        if self.credit_account_id is not None:
            raise RazaoError("Entry already has a credit account.")
        self.get_amount(amount)
        self.credit_account_id = account_id
        return self

    def double(self, debit: str, credit: str, amount: Numeric):
        self.amount(amount)
        return self.debit(debit).credit(credit)

    def validate(self):
        """Raise error if any field required for a transaction is missing."""
        if not self.history or not self.history.strip():
            raise RazaoError("History is required.")
        if self._amount is None:
            raise RazaoError("Amount is not set.")
        if self.debit_account_id is None:
            raise RazaoError("Debit account is not set.")
        if self.credit_account_id is None:
            raise RazaoError("Credit account is not set.")
        return self

    def to_transaction(self, id: str, today: datetime.date | None = None) -> Transaction:
        """Create transaction with given id, date defaults to *today*."""
        self.validate()
        date = self.date or today or datetime.date.today()
        return Transaction(
            id=id,
            date=date,
            value=self._amount,  # type: ignore
            history=self.history,
            debit_account_id=self.debit_account_id,  # type: ignore
            credit_account_id=self.credit_account_id,  # type: ignore
        )
