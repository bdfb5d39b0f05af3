"""Chart of accounts."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from .base import AccountType, RazaoError, SaveLoadMixin


class Account(BaseModel):
    """Account in the chart, identified by a stable `id`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    type: AccountType
    description: str | None = None


class Chart(BaseModel, SaveLoadMixin):
    """Ordered, read-only list of accounts with unique ids."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    accounts: list[Account] = []

    def model_post_init(self, _):
        self.assert_account_ids_are_unique()

    @classmethod
    def from_accounts(cls, accounts: Iterable[Account]):
        return cls(accounts=list(accounts))

    @classmethod
    def default(cls) -> "Chart":
        """Seed chart of a personal household."""
        return cls.from_accounts(INITIAL_CHART)

    @property
    def ids(self) -> list[str]:
        return [account.id for account in self.accounts]

    @property
    def duplicates(self) -> list[str]:
        """Duplicate account ids. Must be empty for valid chart."""
        ids = self.ids
        for account_id in set(ids):
            ids.remove(account_id)
        return ids

    def assert_account_ids_are_unique(self):
        if ds := self.duplicates:
            raise RazaoError(f"Account ids are not unique: {ds}")

    def get(self, account_id: str) -> Account | None:
        for account in self.accounts:
            if account.id == account_id:
                return account
        return None

    def __getitem__(self, account_id: str) -> Account:
        RazaoError.must_exist(self.ids, account_id)
        return self.get(account_id)  # type: ignore

    def __contains__(self, account_id: object) -> bool:
        return account_id in self.ids

    def __len__(self) -> int:
        return len(self.accounts)

    def by_type(self, t: AccountType) -> list[Account]:
        """List accounts of a given type in chart order."""
        return [account for account in self.accounts if account.type == t]


def _accounts(t: AccountType, pairs: list[tuple[str, str]]) -> list[Account]:
    return [Account(id=account_id, name=name, type=t) for account_id, name in pairs]


# fmt: off
INITIAL_CHART: list[Account] = [
    *_accounts(AccountType.Asset, [
        ("a1", "Dinheiro em Espécie"),
        ("a2", "Banco Conta Corrente"),
        ("a3", "Investimentos / Poupança"),
        ("a4", "Veículos"),
        ("a5", "Imóveis"),
    ]),
    *_accounts(AccountType.Liability, [
        ("p1", "Cartão de Crédito"),
        ("p2", "Empréstimos Bancários"),
        ("p3", "Financiamento Imobiliário"),
        ("p4", "Financiamento de Veículo"),
        ("p5", "Dívidas com Terceiros"),
    ]),
    *_accounts(AccountType.Income, [
        ("r1", "Salário / Proventos"),
        ("r2", "Dividendos / Juros"),
        ("r3", "Aluguéis Recebidos"),
        ("r4", "Vendas de Ativos"),
        ("r5", "Outras Receitas"),
    ]),
    *_accounts(AccountType.Expense, [
        ("d1", "Alimentação / Supermercado"),
        ("d2", "Moradia (Aluguel/Condomínio)"),
        ("d3", "Contas Fixas (Luz/Água/Internet)"),
        ("d4", "Transporte (Combustível/Uber)"),
        ("d5", "Saúde (Farmácia/Plano)"),
        ("d6", "Educação (Cursos/Mensalidade)"),
        ("d7", "Lazer e Viagens"),
        ("d8", "Impostos e Taxas"),
        ("d9", "Manutenção Geral"),
        ("d10", "Outras Despesas"),
    ]),
    *_accounts(AccountType.Equity, [
        ("pl1", "Patrimônio Inicial / Capital"),
    ]),
]
# fmt: on
