"""Infrastructure layer: crypto primitives, persistence, email and HTTP API."""
