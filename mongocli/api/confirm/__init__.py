"""Staged confirmation for destructive operations."""
