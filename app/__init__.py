"""Notification feed API application package."""
