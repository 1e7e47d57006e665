"""CLI for econskills."""
