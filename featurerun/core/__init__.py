"""Scenario result aggregation core.

The public names are re-exported from the top-level ``featurerun`` package.
"""
