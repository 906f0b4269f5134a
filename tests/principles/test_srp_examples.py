"""Tests for the Single Responsibility examples."""

import logging

from solidkit.principles.srp import applied, violated


class TestAppliedBankAccount:
    
    def test_deposit_and_withdraw(self):
        account = applied.BankAccount(100)
        
        account.deposit(50)
        account.withdraw(30)
        
        assert account.balance == 120
    
    def test_only_balance_operations(self):
        account = applied.BankAccount()
        
        assert account.balance == 0
        assert not hasattr(account, "send_email_notification")
        assert not hasattr(account, "log_transaction")
    
    def test_demonstrate(self):
        assert applied.demonstrate()[-1] == "Withdrew 30, balance 120"


class TestViolatedBankAccount:
    
    def test_balance_still_works(self):
        account = violated.BankAccount(10)
        
        account.deposit(5)
        account.withdraw(3)
        
        assert account.balance == 12
    
    def test_notification_goes_to_outbox(self):
        account = violated.BankAccount(100)
        account.deposit(50)
        
        account.send_email_notification("owner@example.com")
        
        assert account.outbox == [("owner@example.com", "deposit of 50, balance is now 150")]
    
    def test_notification_without_transaction(self):
        account = violated.BankAccount(7)
        
        account.send_email_notification("a@example.com")
        
        assert account.outbox == [("a@example.com", "Your balance is 7")]
    
    def test_log_transaction(self, caplog):
        account = violated.BankAccount(100)
        account.withdraw(40)
        
        with caplog.at_level(logging.INFO, logger="BankAccount"):
            account.log_transaction()
        
        assert "withdraw 40, balance 60" in caplog.text
    
    def test_demonstrate(self):
        lines = violated.demonstrate()
        
        assert lines[0] == "Deposited 50, balance 150"
        assert any(line.startswith("Notified owner@example.com") for line in lines)
