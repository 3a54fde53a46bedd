"""Loaders for the vCenter association and credential JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from netinventory.generate_subnets.exceptions import ConfigError
from netinventory.generate_subnets.models import AccountCredential, EndpointMap

_ENDPOINT_MAP = TypeAdapter(EndpointMap)
_CREDENTIALS = TypeAdapter(list[AccountCredential])


def _read_json(path: str | Path) -> Any:
    path = Path(path)
    try:
        return json.loads(path.read_text())
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e


def load_endpoint_map(path: str | Path) -> EndpointMap:
    """Load the owner -> router hostname -> vCenter list association file."""
    data = _read_json(path)
    try:
        return _ENDPOINT_MAP.validate_python(data)
    except ValidationError as e:
        raise ConfigError(f"Unexpected vCenter association layout in {path}: {e}") from e


def load_credentials(path: str | Path) -> list[AccountCredential]:
    """Load the list of SoftLayer account credentials."""
    data = _read_json(path)
    try:
        return _CREDENTIALS.validate_python(data)
    except ValidationError as e:
        raise ConfigError(f"Unexpected credential layout in {path}: {e}") from e
