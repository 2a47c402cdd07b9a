"""Domain layer - song catalog and learning materials."""
