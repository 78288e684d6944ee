"""
Hexagonal Users Service.

A small user registry exposed over HTTP, laid out as Ports & Adapters:
`core` holds the domain and use cases, `adapters` the HTTP and storage
implementations, and `shared` the configuration and DI container.
"""

__version__ = "1.0.0"
