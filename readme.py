from decimal import Decimal

from razao import Book, Chart, Entry, Outcome

# Seed chart of accounts
book = Book(chart=Chart.default())

# Post entries
# fmt: off
entries = [
    Entry("Patrimônio inicial").on("2024-03-01").double(debit="a2", credit="pl1", amount=5000),
    Entry("Salário de março").on("2024-03-05").amount(3500).debit("a2").credit("r1"),
    Entry("Aluguel").on("2024-03-10").double(debit="d2", credit="a2", amount=1200),
    Entry("Supermercado no cartão").on("2024-03-12").double(debit="d1", credit="p1", amount="450.90"),
]
# fmt: on
book.post_many(entries)

# Show statements
print(book.balance_sheet.model_dump_json())
print(book.income_statement.model_dump_json())
for line in book.ledger("a2"):
    print(line.date, line.history, line.debit, line.credit, line.balance)

assert book.balance_sheet.is_balanced()
assert book.income_statement.net_result == Decimal("1849.10")
assert book.income_statement.outcome == Outcome.Surplus
assert book.ledger("a2").final_balance == Decimal(7300)

# Save transactions to JSON file in current folder
book.save("razao.json", allow_overwrite=True)
