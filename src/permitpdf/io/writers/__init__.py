"""Output writers keyed by file extension."""
