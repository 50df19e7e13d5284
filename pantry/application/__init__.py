"""Application Layer - use cases (command/query handlers)."""
