"""Typed parsing and validation of OpenAPI specification documents."""

__version__ = "0.1.0"