"""Coverage uploader: commit identity resolution for coverage uploads."""

__version__ = "0.1.0"
