"""
Single Responsibility Principle - applied.

BankAccount manages the balance of an account and nothing else. Deposits
and withdrawals both act on the balance, so the class has one reason to
change.
"""


class BankAccount:
    """An account balance with deposit and withdraw."""
    
    def __init__(self, balance: float = 0):
        self.balance = balance
    
    def deposit(self, amount: float) -> None:
        self.balance += amount
    
    def withdraw(self, amount: float) -> None:
        self.balance -= amount


def demonstrate() -> list[str]:
    account = BankAccount(100)
    lines = [f"Opened account with balance {account.balance}"]
    
    account.deposit(50)
    lines.append(f"Deposited 50, balance {account.balance}")
    
    account.withdraw(30)
    lines.append(f"Withdrew 30, balance {account.balance}")
    return lines
