"""Command line interface for featurerun."""
