"""
Stock unmarshal and validate functions.

The loading pipeline never parses files itself; callers hand it an unmarshal
function and a validate function. This module provides ready-made ones for
YAML and JSON documents and for pydantic models, so the common cases need no
glue code.
"""

import json
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ValidationError


UnmarshalFunc = Callable[[bytes, Any], None]


def populate(target: Any, data: Dict[str, Any]) -> None:
    """
    Copy parsed document data into a target object in place.

    Mappings are updated, pydantic models are validated against their current
    values merged with ``data`` and then assigned field by field, and any other
    object receives one ``setattr`` per key.

    Args:
        target: Caller-owned configuration object
        data: Parsed document

    Raises:
        pydantic.ValidationError: If a pydantic target rejects the data
    """
    if isinstance(target, MutableMapping):
        target.update(data)
        return

    if isinstance(target, BaseModel):
        merged = target.model_dump()
        merged.update(data)
        validated = type(target).model_validate(merged)
        for name in type(target).model_fields:
            setattr(target, name, getattr(validated, name))
        return

    for key, value in data.items():
        setattr(target, key, value)


def _require_mapping(data: Any, format_name: str) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a {format_name} object, got {type(data).__name__}")
    return data


def unmarshal_yaml(content: bytes, target: Any) -> None:
    """
    Parse a YAML document and populate ``target`` with it.

    Args:
        content: Raw file contents
        target: Object to populate

    Raises:
        yaml.YAMLError: If the document is not valid YAML
        ValueError: If the document is not a mapping
    """
    data = yaml.safe_load(content)
    populate(target, _require_mapping(data, 'YAML'))


def unmarshal_json(content: bytes, target: Any) -> None:
    """
    Parse a JSON document and populate ``target`` with it.

    Args:
        content: Raw file contents
        target: Object to populate

    Raises:
        json.JSONDecodeError: If the document is not valid JSON
        ValueError: If the document is not an object
    """
    if not content.strip():
        data = None
    else:
        data = json.loads(content)
    populate(target, _require_mapping(data, 'JSON'))


UNMARSHALLERS: Dict[str, UnmarshalFunc] = {
    '.yaml': unmarshal_yaml,
    '.yml': unmarshal_yaml,
    '.json': unmarshal_json,
}


def unmarshaller_for(path: Union[str, Path]) -> UnmarshalFunc:
    """
    Pick a stock unmarshal function from a file's suffix.

    Args:
        path: Configuration file path

    Returns:
        The matching unmarshal function

    Raises:
        ValueError: If the suffix is not recognised
    """
    suffix = Path(path).suffix.lower()
    try:
        return UNMARSHALLERS[suffix]
    except KeyError:
        supported = ', '.join(sorted(UNMARSHALLERS))
        raise ValueError(f"Unsupported configuration file type '{suffix}' for {path} (supported: {supported})") from None


def validate_model(target: BaseModel) -> Optional[ValidationError]:
    """
    Single-error validator for pydantic models.

    Re-runs model validation on the populated instance, which catches values
    assigned without validation.

    Returns:
        The pydantic ValidationError, or None if the model is valid
    """
    try:
        type(target).model_validate(target.model_dump())
    except ValidationError as e:
        return e
    return None


def model_errors(target: BaseModel) -> List[ValueError]:
    """
    Multi-error validator for pydantic models.

    Returns:
        One ValueError per pydantic error entry, in pydantic's order
    """
    error = validate_model(target)
    if error is None:
        return []

    errors = []
    for entry in error.errors():
        location = '.'.join(str(part) for part in entry['loc']) or '<root>'
        errors.append(ValueError(f"{location}: {entry['msg']}"))
    return errors
