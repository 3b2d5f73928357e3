"""Command-line interface for TEXTMORPH."""
