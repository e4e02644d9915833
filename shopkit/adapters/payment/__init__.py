"""Payment adapters for charging customer cards."""
