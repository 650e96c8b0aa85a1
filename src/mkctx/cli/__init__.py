"""Command-line interface for mkctx."""
