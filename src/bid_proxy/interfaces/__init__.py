"""External interfaces (HTTP API, CLI)."""
