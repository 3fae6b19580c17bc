"""Utility helpers for values2md."""
