"""Command-line interface adapters for storefront commands."""
