"""Parsing and encoding utilities."""
