"""
Core Domain Layer.

This package contains the business rules of the system:
- No dependencies on frameworks (FastAPI, uvicorn).
- No dependencies on infrastructure (storage, telemetry exporters).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
