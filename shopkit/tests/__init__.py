"""Test suite for the shopkit storefront.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - HTTP adapters run against httpx.MockTransport
   - Validates adapter behavior and error handling

3. fakes/: Port implementations for testing
   - In-memory implementations of every driven port
   - Used by core unit tests
"""
