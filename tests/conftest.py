import datetime

import pytest

from razao import Account, AccountType, Book, Chart, Entry


@pytest.fixture
def toy_chart() -> Chart:
    return Chart.from_accounts(
        [
            Account(id="cash", name="Cash", type=AccountType.Asset),
            Account(id="bank", name="Bank Account", type=AccountType.Asset),
            Account(id="card", name="Credit Card", type=AccountType.Liability),
            Account(id="salary", name="Salary", type=AccountType.Income),
            Account(id="rent", name="Rent", type=AccountType.Expense),
            Account(id="food", name="Food", type=AccountType.Expense),
            Account(id="capital", name="Opening Capital", type=AccountType.Equity),
        ]
    )


@pytest.fixture
def entries():
    # fmt: off
    return [
        Entry("Opening balance").on("2024-01-01").double(debit="cash", credit="capital", amount=500),
        Entry("Salary").on("2024-01-05").amount(1000).debit("bank").credit("salary"),
        Entry("Rent").on("2024-01-10").double(debit="rent", credit="bank", amount=200),
        Entry("Groceries").on("2024-01-12").double(debit="food", credit="card", amount="85.50"),
        Entry("Card bill").on("2024-01-20").double(debit="card", credit="bank", amount=85.5),
    ]
    # fmt: on


@pytest.fixture
def transactions(entries):
    return [entry.to_transaction(f"t{i}") for i, entry in enumerate(entries, 1)]


@pytest.fixture
def toy_book(toy_chart, entries) -> Book:
    book = Book(chart=toy_chart)
    book.post_many(entries)
    return book


@pytest.fixture
def today():
    return datetime.date(2024, 2, 1)
