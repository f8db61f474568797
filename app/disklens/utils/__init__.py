"""Utility modules for disklens."""
