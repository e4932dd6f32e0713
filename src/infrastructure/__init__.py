"""Infrastructure layer: logging and error handling shared by the patterns."""
