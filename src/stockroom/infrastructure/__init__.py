"""Infrastructure layer - adapters for persistence."""
