"""In-memory persistence."""
