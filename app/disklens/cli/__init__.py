"""Command line interface for disklens."""
