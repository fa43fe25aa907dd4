"""Checkout sessions and order lookup."""
