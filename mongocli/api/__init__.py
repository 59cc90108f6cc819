"""mongocli API layer.

Commands live in domain packages as ``cmd_*`` functions returning a StageResult.
"""
