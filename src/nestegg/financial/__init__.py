"""Home-buying financial calculations — pure functions over plain numbers."""

from .models import DebtCategory, SavingsBucket, Transaction, TransactionType

__all__ = [
    "DebtCategory",
    "SavingsBucket",
    "Transaction",
    "TransactionType",
]
