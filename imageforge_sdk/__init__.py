"""Shared helpers used across the imageforge layers."""
