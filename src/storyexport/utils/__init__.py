"""Shared helpers: typed errors, logging setup and slug generation."""
