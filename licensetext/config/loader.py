"""Settings loader for license normalization."""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models import NormalizerSettings


def load_settings(config_path: Optional[Path] = None) -> NormalizerSettings:
    """
    Load and validate normalizer settings from a YAML file.

    Without a path the built-in defaults are returned, so library callers
    never need a settings file.

    Args:
        config_path: Optional path to a YAML settings file

    Returns:
        Validated NormalizerSettings

    Raises:
        ConfigurationError: If the file is missing, unparsable, empty or invalid
    """
    if config_path is None:
        return NormalizerSettings()

    config_path = Path(config_path)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(
            f"Settings file not found: {config_path}",
            suggestions=[
                f"Ensure {config_path} exists and is readable",
                "Omit the path to use the built-in defaults",
            ],
        )
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML settings: {e}",
            suggestions=[
                "Check YAML syntax in your settings file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        )

    if not config_dict:
        raise ConfigurationError(
            "Settings file is empty",
            suggestions=["Add settings to the file or omit the path to use defaults"],
        )

    try:
        return NormalizerSettings.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            "Settings validation failed",
            errors=format_validation_errors(e),
            suggestions=[
                "Check that field names are spelled correctly",
                "Verify field types match the expected schema",
            ],
        )


def format_validation_errors(error: ValidationError) -> List[str]:
    """Convert Pydantic validation errors into readable messages.

    Args:
        error: ValidationError raised by model_validate

    Returns:
        One message per error, prefixed with the field path
    """
    messages = []
    for item in error.errors():
        field_path = " -> ".join(str(loc) for loc in item["loc"])
        error_type = item["type"]

        if error_type == "missing":
            messages.append(f"Missing required field: {field_path}")
        elif error_type in ["string_type", "int_type", "bool_type", "list_type"]:
            expected_type = error_type.replace("_type", "")
            messages.append(
                f"Invalid type for '{field_path}': expected {expected_type}, got {item.get('input')}"
            )
        elif "enum" in error_type:
            messages.append(f"Invalid value for '{field_path}': {item['msg']}")
        else:
            messages.append(f"{field_path}: {item['msg']}")
    return messages
