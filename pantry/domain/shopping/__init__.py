"""Shopping bounded context - shopping sessions та checked items."""
