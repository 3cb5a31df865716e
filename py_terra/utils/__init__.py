"""Shared helpers: random source and logging setup."""
