"""Command-line interface for jbfinder."""
