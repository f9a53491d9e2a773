"""Subprocess and git helpers used by the providers."""
