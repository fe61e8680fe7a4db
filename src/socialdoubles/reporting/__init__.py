"""Reports computed over tournament statistics."""

from socialdoubles.reporting.balance import BalanceReport, calculate_balance

__all__ = ["BalanceReport", "calculate_balance"]
