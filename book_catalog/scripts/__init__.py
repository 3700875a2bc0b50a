"""Operational scripts for the book catalog."""
