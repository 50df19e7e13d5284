"""Shopping application layer - commands, queries, DTOs, handlers."""
