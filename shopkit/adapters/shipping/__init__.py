"""Shipping quote adapters.

Implementations:
- Flat rate (offline)
- HTTP carrier API
"""
