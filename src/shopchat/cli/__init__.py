"""Command-line interface for shopchat."""
