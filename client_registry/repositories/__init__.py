"""In-memory storage."""
