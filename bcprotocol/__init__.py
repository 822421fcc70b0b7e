"""Configuration value types, CURVE certificates and ZeroMQ contexts."""

__version__ = "0.1.0"
__all__ = ["authority", "certificate", "context", "endpoint", "settings", "sodium"]