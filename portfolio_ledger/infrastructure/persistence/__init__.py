"""Persistence adapters (SQLAlchemy ledger record store)."""
