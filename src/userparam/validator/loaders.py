"""Parameter schema documents.

A schema document lists parameters under ``parameters``; each entry has a
``name`` plus the settings fields:

```yaml
parameters:
  - name: target
    type: user
    allowedUserTypes: [name, ip]
  - name: users
    type: user
    isMulti: true
```
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .models import ParamSettingsModel

SCHEMA_FILE_SUFFIXES = (".yaml", ".yml", ".json")


def load_param_schema(data: Mapping[str, Any]) -> dict[str, ParamSettingsModel]:
    """Build parameter settings from a loaded schema document.

    Returns:
        Settings by parameter name, in document order. Settings are parsed
        but not normalized; pass them through
        :meth:`ParamValidator.normalize_settings`.

    Raises:
        ValueError: If the document structure or a parameter is invalid
    """
    if not isinstance(data, Mapping) or not isinstance(data.get("parameters"), list):
        raise ValueError("Schema must contain a 'parameters' list")

    schema: dict[str, ParamSettingsModel] = {}
    for i, entry in enumerate(data["parameters"]):
        if not isinstance(entry, Mapping) or not entry.get("name"):
            raise ValueError(f"Parameter {i} must be a mapping with a 'name'")
        fields = {k: v for k, v in entry.items() if k != "name"}
        name = str(entry["name"])
        if name in schema:
            raise ValueError(f"Duplicate parameter: {name}")
        try:
            schema[name] = ParamSettingsModel.model_validate(fields)
        except PydanticValidationError as e:
            raise ValueError(f"Invalid settings for parameter '{name}': {e}") from e
    return schema


def load_param_schema_file(path: str | Path) -> dict[str, ParamSettingsModel]:
    """Read a schema document from a YAML or JSON file.

    JSON documents are read by the YAML parser too.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the extension is not supported, or the file can't be
            parsed or holds an invalid schema
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")
    if path.suffix.lower() not in SCHEMA_FILE_SUFFIXES:
        raise ValueError(
            f"Unsupported schema file {path.name}, expected one of: "
            f"{', '.join(SCHEMA_FILE_SUFFIXES)}"
        )

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse schema file {path}: {e}") from e
    return load_param_schema(data)
