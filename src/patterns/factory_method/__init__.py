"""Factory Method: subclasses pick the product class."""
