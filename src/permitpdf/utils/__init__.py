"""Shared helpers: errors, logging, constants and date formatting."""
