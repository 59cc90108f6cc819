"""Usage statistics stored next to the configuration."""
