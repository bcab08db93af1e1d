"""Ports and shared application state."""
