import datetime
import itertools
from copy import deepcopy
from decimal import Decimal

import pytest

from razao import Entry, LedgerEntry, compute_balances, project
from razao.base import SIGNS
from razao.ledger import debit_view, delta

pytestmark = pytest.mark.ledger


def test_no_transactions_gives_zero_balances(toy_chart):
    balances = compute_balances(toy_chart.accounts, [])
    assert list(balances) == toy_chart.ids
    assert all(v == 0 for v in balances.values())


def test_balances(toy_chart, transactions):
    assert compute_balances(toy_chart.accounts, transactions) == {
        "cash": 500,
        "bank": Decimal("714.5"),
        "card": 0,
        "salary": 1000,
        "rent": 200,
        "food": Decimal("85.5"),
        "capital": 500,
    }


def test_debit_to_asset_credit_to_income_both_increase(toy_chart):
    t = Entry("Salary").double("bank", "salary", "1000.00").to_transaction("x")
    balances = compute_balances(toy_chart.accounts, [t])
    assert balances["bank"] == Decimal("1000.00")
    assert balances["salary"] == Decimal("1000.00")


def test_double_entry_closure(toy_chart, transactions):
    for t in transactions:
        assert sum(debit_view(toy_chart.accounts, t).values()) == 0


def test_debit_view_orients_normal_balance_changes(toy_chart):
    t = Entry("Opening").double("cash", "capital", 500).to_transaction("x")
    assert delta(toy_chart.accounts, t) == {"cash": 500, "capital": 500}
    assert debit_view(toy_chart.accounts, t) == {"cash": 500, "capital": -500}


def test_debit_view_matches_sign_table(toy_chart, transactions):
    for t in transactions:
        changes = delta(toy_chart.accounts, t)
        assert debit_view(toy_chart.accounts, t) == {
            account_id: change * SIGNS[toy_chart[account_id].type].debit
            for account_id, change in changes.items()
        }


def test_order_independence(toy_chart, transactions):
    reference = compute_balances(toy_chart.accounts, transactions)
    for permutation in itertools.permutations(transactions):
        assert compute_balances(toy_chart.accounts, permutation) == reference


def test_inputs_are_not_mutated(toy_chart, transactions):
    before = deepcopy(transactions)
    first = compute_balances(toy_chart.accounts, transactions)
    second = compute_balances(toy_chart.accounts, transactions)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()
    assert transactions == before


def test_dangling_credit_leg_is_skipped(toy_chart, caplog):
    t = Entry("Mystery").double("bank", "nonexistent", 50).to_transaction("x")
    balances = compute_balances(toy_chart.accounts, [t])
    assert balances["bank"] == 50
    assert "nonexistent" not in balances
    assert sum(balances.values()) == 50
    assert "nonexistent" in caplog.text


def test_dangling_both_legs_is_noop(toy_chart):
    t = Entry("Ghost").double("ghost1", "ghost2", 50).to_transaction("x")
    assert delta(toy_chart.accounts, t) == {}


def test_self_reference_is_noop(toy_chart):
    t = Entry("Loop").double("bank", "bank", 10).to_transaction("x")
    assert delta(toy_chart.accounts, t) == {"bank": 0}


def test_projection_running_balance(toy_chart):
    # fmt: off
    ts = [
        Entry("Salary").on("2024-01-05").double("bank", "salary", "1000.00").to_transaction("t1"),
        Entry("Rent").on("2024-01-10").double("rent", "bank", "200.00").to_transaction("t2"),
    ]
    # fmt: on
    entries = project(toy_chart["bank"], ts).to_list()
    assert [e.balance for e in entries] == [Decimal("1000.00"), Decimal("800.00")]
    assert entries[1] == LedgerEntry(
        transaction_id="t2",
        date=datetime.date(2024, 1, 10),
        history="Rent",
        debit=Decimal(0),
        credit=Decimal("200.00"),
        balance=Decimal("800.00"),
    )


def test_projection_sorts_by_date_and_keeps_input_order_on_ties(toy_chart):
    # fmt: off
    ts = [
        Entry("Late").on("2024-02-01").double("bank", "salary", 1).to_transaction("t1"),
        Entry("Same day A").on("2024-01-01").double("bank", "salary", 2).to_transaction("t2"),
        Entry("Same day B").on("2024-01-01").double("food", "bank", 3).to_transaction("t3"),
    ]
    # fmt: on
    entries = list(project(toy_chart["bank"], ts))
    assert [e.transaction_id for e in entries] == ["t2", "t3", "t1"]
    assert [e.balance for e in entries] == [2, -1, 0]


def test_projection_for_credit_normal_account(toy_chart, transactions):
    entries = list(project(toy_chart["card"], transactions))
    assert [(e.debit, e.credit, e.balance) for e in entries] == [
        (0, Decimal("85.5"), Decimal("85.5")),
        (Decimal("85.5"), 0, 0),
    ]


def test_projection_self_reference_fills_both_sides(toy_chart):
    t = Entry("Loop").double("bank", "bank", 10).to_transaction("x")
    (entry,) = project(toy_chart["bank"], [t])
    assert (entry.debit, entry.credit, entry.balance) == (10, 10, 0)


def test_projection_is_restartable(toy_chart, transactions):
    projection = project(toy_chart["bank"], transactions)
    assert list(projection) == list(projection)
    assert projection.final_balance == Decimal("714.5")


def test_projection_snapshot_ignores_later_changes(toy_chart, transactions):
    projection = project(toy_chart["bank"], transactions)
    transactions.clear()
    assert len(projection.to_list()) == 3


def test_projection_without_activity(toy_chart, transactions):
    projection = project(toy_chart["cash"], transactions[1:])
    assert projection.to_list() == []
    assert projection.final_balance == 0


def test_projection_for_unknown_account(transactions):
    projection = project(None, transactions, "nonexistent")
    assert projection.account_type is None
    assert projection.account_id == "nonexistent"
    assert projection.to_list() == []


def test_final_running_balance_equals_engine_balance(toy_chart, transactions):
    balances = compute_balances(toy_chart.accounts, transactions)
    for account in toy_chart.accounts:
        assert project(account, transactions).final_balance == balances[account.id]
