"""Substitution, debugging and diff validation strategies."""
