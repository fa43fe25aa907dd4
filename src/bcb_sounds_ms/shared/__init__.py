"""Shared kernel: settings, logging, exceptions and API envelope."""
