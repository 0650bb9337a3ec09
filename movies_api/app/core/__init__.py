"""Core infrastructure: settings, logging and the movie store."""
