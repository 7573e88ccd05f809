"""Command line applications."""
