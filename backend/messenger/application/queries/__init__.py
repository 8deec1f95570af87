"""Queries - read operations."""
