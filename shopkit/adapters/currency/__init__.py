"""Exchange rate adapters.

Implementations:
- Static rate table (offline)
- HTTP rates API
"""
