"""Utility helpers for keyvy."""
