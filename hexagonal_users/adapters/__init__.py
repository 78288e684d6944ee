"""
Infrastructure Adapters.

This package contains the concrete implementations of the Ports defined in
`hexagonal_users.core.ports`, plus the driving HTTP adapter:
- `api`: The Primary Adapter (Driving) - FastAPI web server.
- `persistence`: Secondary Adapter (Driven) - In-memory user storage.

Dependencies point INWARD. These modules depend on `hexagonal_users.core`,
but `hexagonal_users.core` never imports from here.
"""
