"""Document commands: add, update, delete, find, count."""
