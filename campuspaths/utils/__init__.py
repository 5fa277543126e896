"""Utility helpers shared across campuspaths modules."""
