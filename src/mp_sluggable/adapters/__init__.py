"""Adapters – concrete implementations of the slugging ports."""
