"""Shared utilities for keyforge."""
