from __future__ import annotations

import json
from typing import Any

from pydantic import JsonValue, TypeAdapter, ValidationError

from .errors import StorageParseError

Dataset = dict[str, dict[str, JsonValue]]

_DATASET_ADAPTER: TypeAdapter[Dataset] = TypeAdapter(Dataset)


def validate_dataset(doc: Any) -> Dataset:
    """
    Check that `doc` is shaped as {key: {sub_key: json value}}.

    Raises StorageParseError otherwise.
    """
    try:
        return _DATASET_ADAPTER.validate_python(doc)
    except ValidationError as e:
        raise StorageParseError(f"Expected a mapping of mappings, got: {e}") from e


def parse_dataset(raw: str | bytes) -> Dataset:
    """
    Parse a full JSON document into a Dataset.
    """
    try:
        doc = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise StorageParseError(f"Invalid JSON: {e}") from e
    return validate_dataset(doc)


def serialize_dataset(data: Dataset, *, indent: int = 4) -> str:
    return json.dumps(data, indent=indent)
