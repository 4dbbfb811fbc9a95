"""Command-line tools for scoring and aligning sequences."""
