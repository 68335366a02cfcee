"""In-process publish/subscribe event bus and gRPC address configuration from the environment."""

__version__ = "0.1.0"
__all__ = ["bus", "config"]