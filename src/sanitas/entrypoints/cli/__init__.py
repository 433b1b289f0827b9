"""Command-line entrypoint for SANITAS."""
