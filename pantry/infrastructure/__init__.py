"""Infrastructure Layer - adapters for domain/application ports."""
