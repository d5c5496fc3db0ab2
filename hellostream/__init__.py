"""A gRPC hello service in unary and streaming forms, with Flask HTTP gateways."""

__version__ = "0.1.0"
__all__ = ["messages", "services", "gateways"]