import json
from typing import Any

from ...utils.get_logger import get_logger
from ..OperationCancelled import OperationCancelled
from ..prompt.Prompter import Prompter, required
from .coerce_object_id import coerce_object_id
from .compile_match import compile_match
from .FilterMethod import FilterMethod
from .MatchType import MatchType
from .validate_json_object import validate_json_object

logger = get_logger("query")

MATCH_ALL_PHRASE = "DELETE ALL"


def prompt_filter(prompter: Prompter, allow_match_all: bool = False) -> dict[str, Any]:
    """Build a filter from a guided prompt sequence.

    Args:
        prompter: Source of answers.
        allow_match_all: Offer the "match everything" choice (delete only). Choosing it
            requires typing the exact phrase ``DELETE ALL``.

    Raises:
        OperationCancelled: Match-all was chosen but the phrase did not match.
    """
    methods = [FilterMethod.BY_ID, FilterMethod.BY_FIELD, FilterMethod.CUSTOM_JSON]
    if allow_match_all:
        methods.append(FilterMethod.MATCH_ALL)
    method = prompter.choose("How would you like to specify the query?", methods)

    if method is FilterMethod.BY_ID:
        document_id = prompter.text("Enter document ID", validate=required("Document ID"))
        return {"_id": coerce_object_id(document_id)}

    if method is FilterMethod.BY_FIELD:
        field = prompter.text("Field name to query", validate=required("Field name")).strip()
        match_type = prompter.choose("Match type", list(MatchType))
        value = prompter.text("Field value to match", validate=required("Field value"))
        return compile_match(field, match_type, value)

    if method is FilterMethod.CUSTOM_JSON:
        text = prompter.text('Enter JSON query (e.g., {"name": "John", "age": {"$gt": 25}})', validate=validate_json_object)
        return json.loads(text)

    answer = prompter.exact(f'Type "{MATCH_ALL_PHRASE}" to confirm you want to match ALL documents in this collection')
    if answer != MATCH_ALL_PHRASE:
        logger.info("Match-all filter declined")
        raise OperationCancelled("Delete all operation cancelled")
    logger.warning("Match-all filter confirmed")
    return {}
