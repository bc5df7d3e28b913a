"""Utility helpers for Beaver."""
