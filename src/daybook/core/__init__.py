"""Core infrastructure: configuration, exceptions, storage, and utilities."""
