"""BCB Sounds order service."""
