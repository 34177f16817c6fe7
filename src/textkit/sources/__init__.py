"""Document sources for the CLI."""
