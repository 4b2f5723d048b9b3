"""Builder: step-by-step construction."""
