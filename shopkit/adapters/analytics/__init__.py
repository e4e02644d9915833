"""Analytics adapters for tracking customer activity."""
