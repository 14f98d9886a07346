"""Utilities package for shell-modes: configuration and constants."""
