"""Abstract Factory: families of related products."""
