"""Ingredients application layer - commands, queries, DTOs, handlers."""
