"""Bundled campus map data (CSV)."""
