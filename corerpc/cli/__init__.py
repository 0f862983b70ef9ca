"""CLI module for corerpc."""
