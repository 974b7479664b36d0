"""YAML loading for license registries."""

import functools
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import ValidationError

from licensetext.config.exceptions import RegistryError
from licensetext.config.loader import format_validation_errors
from licensetext.logging import get_logger

from .models import LicenseEntry, StaticLicenseRegistry

logger = get_logger(__name__, component="registry")

BUNDLED_REGISTRY_PATH = Path(__file__).parent / "data" / "licenses.yaml"


def load_registry(registry_path: Path) -> StaticLicenseRegistry:
    """
    Load a license registry from a YAML file.

    The file holds either a list of entries or a mapping with a ``licenses``
    key holding that list. Each entry needs at least ``key`` and ``title``.

    Args:
        registry_path: Path to the YAML registry file

    Returns:
        StaticLicenseRegistry over the validated entries

    Raises:
        RegistryError: If the file is missing, unparsable, empty or invalid
    """
    registry_path = Path(registry_path)

    try:
        with open(registry_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise RegistryError(
            f"License registry not found: {registry_path}",
            suggestions=[f"Ensure {registry_path} exists and is readable"],
        )
    except yaml.YAMLError as e:
        raise RegistryError(
            f"Failed to parse license registry: {e}",
            suggestions=["Check YAML syntax in the registry file"],
        )

    raw_entries = _extract_entries(data, registry_path)

    entries: List[LicenseEntry] = []
    errors: List[str] = []
    for index, raw in enumerate(raw_entries):
        try:
            entries.append(LicenseEntry.model_validate(raw))
        except ValidationError as e:
            errors.extend(f"licenses -> {index} -> {msg}" for msg in format_validation_errors(e))

    if errors:
        raise RegistryError(
            "License registry validation failed",
            errors=errors,
            suggestions=["Every entry needs a non-empty 'key' and 'title'"],
        )

    logger.debug(
        f"Loaded {len(entries)} licenses from {registry_path}",
        extra={
            "event": "registry.loaded",
            "registry_path": str(registry_path),
            "license_count": len(entries),
        },
    )
    return StaticLicenseRegistry(entries)


def _extract_entries(data: Any, registry_path: Path) -> list:
    """Pull the entry list out of the parsed YAML document."""
    if isinstance(data, dict):
        data = data.get("licenses")

    if not data:
        raise RegistryError(
            f"License registry is empty: {registry_path}",
            suggestions=["Add a list of licenses, or a 'licenses:' key holding one"],
        )

    if not isinstance(data, list):
        raise RegistryError(
            f"License registry must be a list of entries, got {type(data).__name__}",
            suggestions=["Add a list of licenses, or a 'licenses:' key holding one"],
        )

    return data


@functools.lru_cache(maxsize=1)
def bundled_registry() -> StaticLicenseRegistry:
    """Registry of common licenses shipped with the package."""
    return load_registry(BUNDLED_REGISTRY_PATH)
