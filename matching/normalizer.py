import json
import logging
import re
from typing import Any, Dict, List

from pydantic import ValidationError

from schemas import EvaluatorResult

logger = logging.getLogger(__name__)

# ```json\n{...}\n```  /  ```{...}```  /  ```ts {...} ```
CODE_FENCE_PATTERN = re.compile(r"^```[\w+\-]*\s*\n?(.*?)\n?```$", re.DOTALL)
STRAY_BACKTICKS_PATTERN = re.compile(r"^`{1,3}|`{1,3}$")


class ReplyError(ValueError):
    """The model answered, but the answer cannot be turned into an EvaluatorResult."""


class MalformedReplyError(ReplyError):
    pass


class IncompleteReplyError(ReplyError):
    def __init__(self, message: str, violations: List[Dict[str, Any]]):
        super().__init__(message)
        self.violations = violations


def _reject_constant(name: str):
    # NaN, Infinity, -Infinity are not JSON
    raise ValueError(f"non-standard JSON constant {name!r}")


def strip_code_fences(text: str) -> str:
    """
    Remove Markdown code fences the model may wrap its JSON in.

    Only fence delimiters are removed: backticks inside the content are kept,
    and text that is not fence-wrapped passes through trimmed but otherwise unchanged.
    """
    clean = text.strip()

    match = CODE_FENCE_PATTERN.match(clean)
    if match and match.group(1):
        clean = match.group(1).strip()

    # leftovers of half-written fences at either end
    clean = STRAY_BACKTICKS_PATTERN.sub("", clean)
    return clean.strip()


def parse_evaluation(text: str) -> EvaluatorResult:
    """
    Clean, parse and validate a raw model reply.

    Raises:
        MalformedReplyError: the cleaned text is not JSON
        IncompleteReplyError: JSON, but not an object with numeric score and four string fields
    """
    cleaned = strip_code_fences(text)

    try:
        data = json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedReplyError(f"AI reply is not valid JSON: {e}") from e

    try:
        return EvaluatorResult.model_validate(data)
    except ValidationError as e:
        violations = e.errors(include_url=False, include_input=False)
        fields = ", ".join(".".join(str(p) for p in v["loc"]) or "<root>" for v in violations)
        logger.warning("AI reply failed validation (%d issue(s)): %s", len(violations), fields)
        raise IncompleteReplyError(f"AI reply is missing or mistyped fields: {fields}", violations) from e
