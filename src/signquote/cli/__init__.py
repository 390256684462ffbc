"""Command-line interface for signquote."""
