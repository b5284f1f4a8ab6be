"""menuauth - group-based menu permission resolution service."""

__version__ = "0.1.0"
