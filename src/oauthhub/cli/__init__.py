"""Command line interface for oauthhub."""
