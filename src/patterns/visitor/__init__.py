"""Visitor: operations separated from the object structure."""
