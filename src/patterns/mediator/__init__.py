"""Mediator: components talk through a hub."""
