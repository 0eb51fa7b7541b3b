"""Portfolio ledger: per-owner portfolio, holdings, transaction log and goals."""

__version__ = "0.1.0"
