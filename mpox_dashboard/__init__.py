"""MPOX Brasil dashboard: OpenDataSUS connectivity check with a fallback dataset."""

__version__ = '0.2.0'
