"""Command line interface for cwctl."""
