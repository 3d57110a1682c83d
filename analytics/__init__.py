"""Extraction statistics and reports."""
