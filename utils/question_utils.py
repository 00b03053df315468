"""Turns a free-form LLM reply into a list of question records."""

import json
import re
from typing import Any, Dict, List

from logger import get_logger
from utils.response_format import QuestionRecord, QuestionType

logger = get_logger(__name__)

FENCED_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)

RAW_OUTPUT_PREFIX = "Could not parse structured response. Here's the raw output:\n"


def strip_json_fence(text: str) -> str:
    """Returns the body of the first fenced block in `text`, or `text`
    unchanged when there is none."""
    match = FENCED_BLOCK_RE.search(text)
    return match.group(1) if match else text


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, bool)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _to_record(item: Dict[str, Any], question_type: QuestionType) -> QuestionRecord:
    question = item.get("question")
    if question is None:
        logger.warning(f"Generated item has no question field: {item}")

    options = item.get("options")
    if not isinstance(options, list):
        options = []

    return QuestionRecord(
        question=_as_text(question),
        options=[_as_text(option) for option in options],
        answer=_as_text(item.get("answer") or ""),
        type=question_type,
    )


def parse_questions(text: str, question_type: QuestionType) -> List[QuestionRecord]:
    """Strict parse of an LLM reply.

    Raises:
        ValueError: if the reply is not a JSON array of objects.
    """
    # NaN and Infinity are not JSON
    parsed = json.loads(strip_json_fence(text), parse_constant=_reject_constant)
    if not isinstance(parsed, list):
        raise ValueError(f"Expected a JSON array, got {type(parsed).__name__}")

    records = []
    for index, item in enumerate(parsed):
        if not isinstance(item, dict):
            raise ValueError(
                f"Expected a JSON object at index {index}, got {type(item).__name__}"
            )
        records.append(_to_record(item, question_type))
    return records


def normalize_questions(
    raw_text: str, question_type: QuestionType
) -> List[QuestionRecord]:
    """Normalizes an LLM reply into question records. Never raises.

    A reply that cannot be read as a JSON array of objects becomes a
    single record carrying the raw output, so the caller always has
    something to render. An empty array stays empty.
    """
    try:
        return parse_questions(raw_text, question_type)
    except Exception as e:
        logger.warning(
            f"Failed to parse JSON from LLM response ({e}), treating as plain text: {raw_text}"
        )
        return [
            QuestionRecord(
                question=RAW_OUTPUT_PREFIX + _as_text(raw_text),
                options=[],
                answer="",
                type=question_type,
            )
        ]
