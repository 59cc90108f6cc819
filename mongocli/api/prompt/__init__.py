"""Prompt sources for interactive commands."""
