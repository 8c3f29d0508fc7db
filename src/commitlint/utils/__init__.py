"""Utility modules for commitlint."""
