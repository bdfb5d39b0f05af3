from .base import AccountType, RazaoError, UnknownAccountReference
from .book import Book, Journal
from .chart import INITIAL_CHART, Account, Chart
from .config import Settings, get_settings
from .entry import Entry, Transaction
from .ledger import Balances, LedgerEntry, Projection, compute_balances, project
from .report import BalanceSheet, Dashboard, IncomeStatement, Outcome, ReportDict
