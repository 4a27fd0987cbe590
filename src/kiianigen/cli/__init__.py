"""Command line interface for kiianigen."""
