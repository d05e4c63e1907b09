"""
BankCompare data layer.

Relational model, query-access layer and migrations for the bank and
service comparison application.
"""

__version__ = "0.1.0"
