"""Proxy: a stand-in controlling access to a subject."""
