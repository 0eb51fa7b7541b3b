"""Test suite for portfolio-ledger.

Test structure:
- unit/: Domain logic, adapters and handlers in isolation
- integration/: Repository and ledger workflows against in-memory SQLite
"""
