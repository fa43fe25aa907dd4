"""Checkout application layer."""
