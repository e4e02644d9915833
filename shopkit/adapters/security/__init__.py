"""Security code adapters for one-time login codes."""
