"""Utility helpers for featurerun."""
