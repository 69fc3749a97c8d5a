"""Decoding of LLM extraction output into food records.

The model is asked for strict JSON but the shape is not guaranteed. Decoding
goes strict → loose → empty:

1. validate the whole array under the expected key at once;
2. otherwise validate item by item, dropping items that are not objects or
   fail validation;
3. a missing or non-array value decodes to an empty list.

Only empty output or text that is not JSON is treated as an upstream failure.
"""

import json
import logging
import math
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


def parse_json_object(raw: str) -> Any:
    """Parse model output as JSON, tolerating markdown code fences.

    Raises:
        ValueError if the text is not valid JSON.
    """
    text = (raw or "").strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    if not text:
        raise ValueError("empty response")
    return json.loads(text)


def decode_records(
    parsed: Any,
    key: str,
    model: type[R],
    *,
    allow_root_array: bool = False,
) -> list[R]:
    """Pull a list of ``model`` records out of ``parsed[key]``."""
    if isinstance(parsed, dict):
        items = parsed.get(key)
    elif allow_root_array and isinstance(parsed, list):
        items = parsed
    else:
        items = None

    if not isinstance(items, list):
        if items is not None:
            logger.warning(f"Expected a list under {key!r}, got {type(items).__name__}")
        return []

    try:
        return TypeAdapter(list[model]).validate_python(items)
    except ValidationError:
        pass

    records: list[R] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Dropping malformed {model.__name__}: {e.error_count()} errors")
    return records


def coerce_float(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return number if math.isfinite(number) else default


def coerce_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default
