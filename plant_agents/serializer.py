"""
Serialization utilities for embedding pipeline data in prompts and output.

Converts Pydantic models and enums to plain dicts and native Python types.
"""

import json
from enum import Enum
from pydantic import BaseModel


def serialize_value(value):
    """
    Recursively serialize a single value.

    - Pydantic BaseModel instances → dict (None fields dropped)
    - Enum instances → string value
    - Lists / dicts → serialized element-wise
    - Primitives pass through
    """
    if isinstance(value, BaseModel):
        return serialize_value(value.model_dump(exclude_none=True))

    if isinstance(value, Enum):
        return value.value

    if isinstance(value, list):
        return [serialize_value(item) for item in value]

    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}

    return value


def to_pretty_json(value) -> str:
    """Serialize value and render it as 2-space indented JSON."""
    return json.dumps(serialize_value(value), indent=2, ensure_ascii=False)
