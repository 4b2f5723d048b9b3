"""Template Method: algorithm skeleton with overridable steps."""
