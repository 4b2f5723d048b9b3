"""State: behaviour that follows internal state."""
