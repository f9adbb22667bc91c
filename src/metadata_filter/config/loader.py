"""
Configuration Loader - Filter Sets From YAML.

A filter set config lists, per field, the dotted paths of its filter
functions. Profiles are extra YAML files stored in a ``profiles``
directory next to the base config. Applying a profile works like
``MetadataFilter.append``: its chains are added after the base chains
for the same field, and new fields are created. Any other section of
a profile (e.g. ``logging``) replaces the base one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml

from metadata_filter.config.models import FilterSetConfig

logger = logging.getLogger(__name__)

ProfileNames = Union[str, Sequence[str], None]


class ConfigLoader:
    """Loads filter set configs and applies profiles on top of them."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Args:
            base_path: Directory relative config paths are resolved against
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: ProfileNames = None,
    ) -> FilterSetConfig:
        """
        Load a filter set config, applying profiles in the given order.

        Args:
            config_path: Path to YAML config file
            profile: Profile name or names, looked up as
                     ``<config dir>/profiles/<name>.yaml``

        Returns:
            Validated FilterSetConfig object

        Raises:
            FileNotFoundError: If the config or a profile file doesn't exist
            ValidationError: If the resulting config is invalid
        """
        path = self._resolve_path(config_path)
        logger.info(f"Loading filter config from {path}")
        raw = self._read_mapping(path)

        for name in self._profile_names(profile):
            profile_path = path.parent / "profiles" / f"{name}.yaml"
            if not profile_path.exists():
                raise FileNotFoundError(f"Profile not found: {name}")
            logger.debug(f"Applying filter profile '{name}'")
            raw = apply_profile(raw, self._read_mapping(profile_path))

        return FilterSetConfig.model_validate(raw)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> FilterSetConfig:
        """Validate a filter set config given as a dictionary."""
        return FilterSetConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    @staticmethod
    def _profile_names(profile: ProfileNames) -> List[str]:
        if not profile:
            return []
        if isinstance(profile, str):
            return [profile]
        return list(profile)

    @staticmethod
    def _read_mapping(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Filter config {path} must be a mapping, got '{type(data).__name__}'"
            )
        return data


def apply_profile(base: Dict[str, Any], profile: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a new raw config with a profile applied to it.

    Field chains of the profile are appended to the base chains; other
    sections replace the base ones.
    """
    result = dict(base)
    for key, value in profile.items():
        if key == "fields" and isinstance(value, dict):
            result["fields"] = _append_chains(result.get("fields") or {}, value)
        else:
            result[key] = value
    return result


def _append_chains(base: Dict[str, Any], extra: Dict[str, Any]) -> Dict[str, Any]:
    fields = {field: _as_chain(paths) for field, paths in base.items()}
    for field, paths in extra.items():
        fields[field] = fields.get(field, []) + _as_chain(paths)
    return fields


def _as_chain(paths: Any) -> List[Any]:
    if isinstance(paths, str):
        return [paths]
    if isinstance(paths, (list, tuple)):
        return list(paths)
    # Left for FilterSetConfig validation to reject
    return [paths]


def load_config(
    config_path: Union[str, Path],
    profile: ProfileNames = None,
    base_path: Optional[Path] = None,
) -> FilterSetConfig:
    """
    Convenience function to load a filter set config.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name or names
        base_path: Base path for resolving relative paths

    Returns:
        Validated FilterSetConfig object
    """
    return ConfigLoader(base_path=base_path).load(config_path, profile)
