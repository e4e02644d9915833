"""External adapters for the shopkit storefront.

This package contains all external dependencies (rates APIs, carriers,
payment processors, terminals, etc.) and provides implementations of the
core port interfaces.

Adapter Organization:

- currency/: Exchange rate adapters (static table, HTTP rates API)
- shipping/: Shipping quote adapters (flat rate, HTTP carrier API)
- payment/: Payment processor adapters (HTTP)
- email/: Customer email adapters (stdout)
- analytics/: Page view tracking (logging)
- security/: One-time code generation
- clock/: Wall-clock time
- cli/: Command-line interface commands
"""
