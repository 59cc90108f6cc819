"""Database API module.

Provides the gateway that owns the process's single database client.
"""
