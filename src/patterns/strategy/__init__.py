"""Strategy: interchangeable algorithms."""
