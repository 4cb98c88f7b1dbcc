"""Command modules for the pacecalc CLI."""
