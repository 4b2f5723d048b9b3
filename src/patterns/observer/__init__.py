"""Observer: subscribers notified about events."""
