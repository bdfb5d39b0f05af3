from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Iterable, NamedTuple

Numeric = int | float | Decimal


class RazaoError(Exception):
    pass

    @staticmethod
    def must_exist(collection: Iterable[str], name: str):
        if name not in collection:
            raise RazaoError(f"Account {name} not found.")


class UnknownAccountReference(RazaoError):
    """Transaction refers to an account id that is not in the chart."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Unknown account reference: {account_id}")


class AccountType(Enum):
    Asset = "Ativo"
    Liability = "Passivo"
    Income = "Receita"
    Expense = "Despesa"
    Equity = "Patrimônio Líquido"

    def __repr__(self):
        return self.name

    @property
    def side(self) -> "Side":
        return SIGNS[self]

    @property
    def is_debit_normal(self) -> bool:
        return self.side.debit > 0


class Side(NamedTuple):
    """Effect of a debit and of a credit on account balance."""

    debit: int
    credit: int


DEBIT_NORMAL = Side(debit=1, credit=-1)
CREDIT_NORMAL = Side(debit=-1, credit=1)

SIGNS: dict[AccountType, Side] = {
    AccountType.Asset: DEBIT_NORMAL,
    AccountType.Expense: DEBIT_NORMAL,
    AccountType.Liability: CREDIT_NORMAL,
    AccountType.Income: CREDIT_NORMAL,
    AccountType.Equity: CREDIT_NORMAL,
}


class SaveLoadMixin:
    """A mix-in class for loading and saving pydantic models to files."""

    @classmethod
    def load(cls, filename: str | Path):
        return cls.model_validate_json(Path(filename).read_text(encoding="utf-8"))  # type: ignore

    def save(self, filename: str | Path, allow_overwrite: bool = False):
        if not allow_overwrite and Path(filename).exists():
            raise FileExistsError(f"File already exists: {filename}")
        content = self.model_dump_json(indent=2, by_alias=True)  # type: ignore
        Path(filename).write_text(content, encoding="utf-8")
