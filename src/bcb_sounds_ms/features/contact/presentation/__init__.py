"""Contact presentation layer."""
