"""Webhook presentation layer."""
