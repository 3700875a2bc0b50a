"""Core configuration and error handling."""
