"""Core settings and logging for intl."""
