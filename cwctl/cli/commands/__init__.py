"""Commands for cwctl."""
