"""Utility helpers for termdecl."""
