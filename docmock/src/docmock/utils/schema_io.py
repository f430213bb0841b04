"""Utilities for loading schema definitions and saving mock documents as JSON."""

import base64
import json
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, List, Mapping, Union

from docmock.schema.models import Schema


def load_schema_from_json(schema_path: Path) -> Schema:
    """
    Load a Schema from a JSON file holding a declarative definition.

    Args:
        schema_path: Path to the JSON file

    Returns:
        Loaded Schema instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty, not JSON, or not a valid definition
    """
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")

    file_content = schema_path.read_text(encoding="utf-8").strip()
    if not file_content:
        raise ValueError(f"Schema file is empty: {schema_path}")

    try:
        definition = json.loads(file_content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse schema file {schema_path}: {e}") from e

    if not isinstance(definition, dict):
        raise ValueError(f"Schema file {schema_path} must contain a JSON object")
    return Schema.from_definition(definition)


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def documents_to_json(documents: Union[Mapping[str, Any], List[Mapping[str, Any]]], indent: int = 2) -> str:
    """Serialize documents; dates become ISO-8601 and bytes become base64."""
    return json.dumps(documents, indent=indent, default=_json_default, ensure_ascii=False)


def save_documents_to_json(documents: Union[Mapping[str, Any], List[Mapping[str, Any]]], out_path: Path) -> None:
    """
    Save documents to a JSON file.

    Note:
        Creates parent directories if they don't exist.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(documents_to_json(documents), encoding="utf-8")
