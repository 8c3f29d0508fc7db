"""Commit message linting for the flutter-tizen/flutterfire repository."""

__version__ = "0.1.0"
