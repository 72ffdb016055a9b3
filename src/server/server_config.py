"""Configuration for the server."""

MAX_NOTES_SIZE = 500_000  # Characters accepted in a single request body
