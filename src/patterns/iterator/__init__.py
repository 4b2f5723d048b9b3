"""Iterator: traversal without exposing the collection."""
