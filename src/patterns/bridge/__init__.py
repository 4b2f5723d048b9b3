"""Bridge: abstraction and implementation vary independently."""
