"""Payroll bureau scheduling: UK pay dates, HMRC deadlines and run tracking."""

__version__ = "0.1.0"
