"""
YAML config loader with schema validation.

Loads SimulationConfig tuning constants from a YAML file and validates
them against a JSON schema. Keys not present in the file keep their
defaults from constants.py.
"""

import yaml
import json
from pathlib import Path
from typing import Optional
import jsonschema

from .data_types import SimulationConfig

PACKAGE_DIR = Path(__file__).parent
DEFAULT_SCHEMA_PATH = PACKAGE_DIR / "schemas" / "config.schema.json"
DEFAULT_CONFIG_PATH = PACKAGE_DIR / "data" / "default.yaml"


class ConfigLoadError(Exception):
    """Raised when config loading or validation fails"""
    pass


def load_yaml(file_path: Path) -> dict:
    """Load YAML file and return parsed dict (empty dict for an empty file)"""
    file_path = Path(file_path)
    if not file_path.exists():
        raise ConfigLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"YAML parse error in {file_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping at top level of {file_path}")
    return data


def validate_against_schema(data: dict, schema_path: Path, data_path: Path):
    """Validate data dict against JSON schema"""
    if not schema_path.exists():
        # Schema validation optional when a custom schema path is missing
        return

    try:
        with open(schema_path, 'r') as f:
            schema = json.load(f)
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise ConfigLoadError(f"Validation error in {data_path}: {e.message}")
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Invalid JSON schema {schema_path}: {e}")


def config_from_dict(data: dict, source: str = "<dict>") -> SimulationConfig:
    """
    Build a SimulationConfig from a (validated) mapping.

    The mapping may be flat or nest the keys under a `simulation` section,
    but not both.
    """
    if 'simulation' in data:
        values = data['simulation']
        if not isinstance(values, dict):
            raise ConfigLoadError(f"Expected a mapping for 'simulation' in {source}")
        extra = sorted(set(data) - {'simulation'})
        if extra:
            raise ConfigLoadError(f"Unexpected top-level keys in {source}: {', '.join(extra)}")
    else:
        values = data

    unknown = sorted(set(values) - set(SimulationConfig.field_names()))
    if unknown:
        raise ConfigLoadError(f"Unknown config keys in {source}: {', '.join(unknown)}")
    return SimulationConfig(**values)


def load_config(file_path: Path, schema_path: Optional[Path] = None) -> SimulationConfig:
    """
    Load simulation tuning constants from YAML.

    Args:
        file_path: YAML config file
        schema_path: JSON schema (defaults to the packaged config schema)

    Returns:
        SimulationConfig with file values over defaults
    """
    file_path = Path(file_path)
    data = load_yaml(file_path)

    schema_path = Path(schema_path) if schema_path else DEFAULT_SCHEMA_PATH
    validate_against_schema(data, schema_path, file_path)

    return config_from_dict(data, str(file_path))


def load_default_config() -> SimulationConfig:
    """Load the packaged default config"""
    return load_config(DEFAULT_CONFIG_PATH)
