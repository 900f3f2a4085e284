"""Domain layer - Serato record format and library object graph."""
