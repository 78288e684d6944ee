"""HTTP adapter: FastAPI app factory, routers and error translation."""
