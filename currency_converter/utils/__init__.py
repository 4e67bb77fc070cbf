"""Shared helpers: errors, logging and input validation."""
