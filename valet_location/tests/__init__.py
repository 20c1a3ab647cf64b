"""Valet Location tests."""
