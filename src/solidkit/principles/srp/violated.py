"""
Single Responsibility Principle - violated.

This BankAccount manages the balance, sends email notifications and logs
transactions. Each of those is a separate reason to change, and testing
the balance logic now drags the other two along. It would be better split
into an account class and a notification/logging class.
"""

import logging
from typing import Optional


class BankAccount:
    """An account that also notifies and logs. Kept as the anti-pattern."""
    
    def __init__(self, balance: float = 0):
        self.balance = balance
        self.outbox: list[tuple[str, str]] = []
        self.logger = logging.getLogger("BankAccount")
        self._last_transaction: Optional[tuple[str, float]] = None
    
    def deposit(self, amount: float) -> None:
        self.balance += amount
        self._last_transaction = ("deposit", amount)
    
    def withdraw(self, amount: float) -> None:
        self.balance -= amount
        self._last_transaction = ("withdraw", amount)
    
    def send_email_notification(self, email: str) -> None:
        """Queue an email notification of the last transaction."""
        if self._last_transaction is None:
            body = f"Your balance is {self.balance}"
        else:
            kind, amount = self._last_transaction
            body = f"{kind} of {amount}, balance is now {self.balance}"
        self.outbox.append((email, body))
    
    def log_transaction(self) -> None:
        """Write the last transaction to the transaction log."""
        if self._last_transaction is None:
            self.logger.info(f"No transaction, balance {self.balance}")
            return
        kind, amount = self._last_transaction
        self.logger.info(f"{kind} {amount}, balance {self.balance}")


def demonstrate() -> list[str]:
    account = BankAccount(100)
    account.deposit(50)
    account.send_email_notification("owner@example.com")
    account.log_transaction()
    
    lines = [f"Deposited 50, balance {account.balance}"]
    for email, body in account.outbox:
        lines.append(f"Notified {email}: {body}")
    lines.append("Logged the transaction from inside the account class")
    return lines
