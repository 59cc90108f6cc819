"""Home directory, ``config.json``, ``.env`` loading and the ``init`` command."""
