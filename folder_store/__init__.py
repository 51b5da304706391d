"""Folder Store: organization folder listings with token-based pagination."""

__version__ = "1.0.0"
