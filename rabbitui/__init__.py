"""Terminal client for the RabbitMQ Management API: HTTP client, data models and interface."""

__version__ = "0.1.0"