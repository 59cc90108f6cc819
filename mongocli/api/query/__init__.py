"""Query/update builder.

Turns flag-supplied JSON or an interactive prompt sequence into filters,
update specifications and documents.
"""
