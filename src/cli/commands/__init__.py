"""Commands for the pace CLI."""
