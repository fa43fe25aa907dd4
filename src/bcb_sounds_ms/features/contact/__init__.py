"""Contact form intake."""
