"""Core configuration, path and theme management for disklens."""
