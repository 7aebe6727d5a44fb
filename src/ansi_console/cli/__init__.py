"""Command line demo of the ANSI executor."""
