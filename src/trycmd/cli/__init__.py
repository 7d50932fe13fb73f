"""Command line interface for trycmd."""
