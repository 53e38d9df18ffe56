"""Multi-tenant notes service."""

__version__ = "1.0.0"
