"""Payload readers keyed by file extension."""
