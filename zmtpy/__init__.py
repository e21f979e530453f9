"""ZeroMQ-style messaging primitives: messages, endpoints, socket types, fair queueing and proxying."""

__version__ = "0.1.0"