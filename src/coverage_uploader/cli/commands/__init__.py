"""CLI command modules for the coverage uploader."""
