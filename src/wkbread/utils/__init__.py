"""Shared utilities for wkbread."""
