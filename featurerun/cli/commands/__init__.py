"""CLI commands for featurerun."""

from .report import report

__all__ = ['report']
