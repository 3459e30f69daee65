"""Developer command-line helpers."""
