"""Email adapters for customer messages.

Implementations:
- Stdout (terminal pretty-print)
"""
