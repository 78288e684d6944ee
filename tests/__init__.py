"""
Test Suite for the Hexagonal Users Service.

Organization:
- `core`: Domain model and use case tests with mocked Ports.
- `adapters`: Persistence adapter tests and end-to-end HTTP tests.
"""
