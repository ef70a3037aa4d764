"""Core infrastructure: settings, database, logging and error types."""
