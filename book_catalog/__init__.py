"""Book catalog service: REST API, relational store and browser UI."""

__version__ = "1.0.0"
