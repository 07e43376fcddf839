"""HTTP transport: wire codec, routes and the FastAPI application."""
