"""Command-line driver for stockroom."""
