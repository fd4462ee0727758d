"""Export utilities for views."""

import json
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel


def to_json(view: BaseModel, indent: int = 2) -> str:
    """
    Convert a view to a JSON string.

    Args:
        view: View to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return view.model_dump_json(indent=indent)


def to_dict(view: BaseModel) -> dict:
    """
    Convert a view to a JSON-compatible dictionary.

    Enums become their values; absent optional fields stay as None.
    """
    return view.model_dump(mode="json")


def save_json(
    view: BaseModel | Iterable[BaseModel],
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save a view, or a list of views, to a JSON file.

    Args:
        view: View or iterable of views
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    data: Any
    if isinstance(view, BaseModel):
        data = to_dict(view)
    else:
        data = [to_dict(v) for v in view]

    filepath.write_text(json.dumps(data, indent=indent, ensure_ascii=False), encoding="utf-8")
    return filepath
