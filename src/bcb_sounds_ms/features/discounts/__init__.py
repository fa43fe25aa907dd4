"""Promotional discount codes."""
