"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Config loading, normalization and profile chains appended to base chains
    ✅ Error Handling: Invalid values, missing files
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from metadata_filter.config.loader import ConfigLoader, apply_profile, load_config
from metadata_filter.config.models import FilterSetConfig


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """
        SCENARIO: Valid YAML configuration file
        EXPECTED: FilterSetConfig object created
        """
        # Arrange
        config_content = """
version: "1.0"
fields:
  title:
    - builtins.str.strip
    - builtins.str.lower
"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(config_content)

        loader = ConfigLoader(base_path=tmp_path)

        # Act
        config = loader.load("config.yaml")

        # Assert
        assert isinstance(config, FilterSetConfig)
        assert config.fields["title"] == ["builtins.str.strip", "builtins.str.lower"]

    def test_applies_defaults(self) -> None:
        """
        SCENARIO: Minimal config
        EXPECTED: Defaults applied for missing sections
        """
        config = ConfigLoader().load_from_dict({})

        assert config.version == "1.0"
        assert config.fields == {}
        assert config.logging.level == "WARNING"

    def test_single_path_normalized_to_list(self) -> None:
        """A single path is wrapped into a one-element list."""
        config = ConfigLoader().load_from_dict({"fields": {"title": "builtins.str.strip"}})

        assert config.fields == {"title": ["builtins.str.strip"]}

    def test_log_level_is_uppercased(self) -> None:
        config = ConfigLoader().load_from_dict({"logging": {"level": "debug"}})

        assert config.logging.level == "DEBUG"

    @pytest.mark.parametrize(
        "config_dict",
        [
            {"fields": {"title": []}},
            {"fields": {"title": ["  "]}},
            {"fields": {"title": [1]}},
            {"fields": ["builtins.str.strip"]},
            {"logging": {"level": "LOUD"}},
        ],
    )
    def test_validates_invalid_config(self, config_dict: dict) -> None:
        """
        SCENARIO: Config with invalid values
        EXPECTED: ValidationError raised
        """
        with pytest.raises(ValidationError):
            ConfigLoader().load_from_dict(config_dict)

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        config = load_config(config_file)

        assert config.fields == {}

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ConfigLoader(base_path=tmp_path).load("missing.yaml")

    def test_non_mapping_yaml_raises(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- builtins.str.strip\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(config_file)


class TestConfigProfiles:
    """Test cases for applying profiles on top of a base config."""

    def test_profile_chain_appended_to_base_chain(self, fixtures_path: Path) -> None:
        """
        SCENARIO: Profile adds a filter to a field the base config already has
        EXPECTED: Profile filter runs after the base filters, like append
        """
        config = load_config(
            "sample_filters.yaml",
            profile="uppercase",
            base_path=fixtures_path,
        )

        assert config.fields["album"] == ["builtins.str.strip", "builtins.str.upper"]
        assert config.fields["track"] == [
            "builtins.str.strip",
            "tests.fixtures.filters.remove_remastered",
        ]

    def test_profile_replaces_logging_section(self, fixtures_path: Path) -> None:
        config = load_config(
            "sample_filters.yaml",
            profile="uppercase",
            base_path=fixtures_path,
        )

        assert config.logging.level == "INFO"

    def test_profiles_applied_in_order(self, fixtures_path: Path) -> None:
        """
        SCENARIO: Two profiles, the second adding a new field
        EXPECTED: Both applied; new field created from the second profile
        """
        config = load_config(
            "sample_filters.yaml",
            profile=["uppercase", "titles"],
            base_path=fixtures_path,
        )

        assert config.fields["album"][-1] == "builtins.str.upper"
        assert config.fields["title"] == ["builtins.str.strip", "builtins.str.title"]

    def test_same_profile_twice_appends_twice(self, fixtures_path: Path) -> None:
        config = load_config(
            "sample_filters.yaml",
            profile=["uppercase", "uppercase"],
            base_path=fixtures_path,
        )

        assert config.fields["album"] == [
            "builtins.str.strip",
            "builtins.str.upper",
            "builtins.str.upper",
        ]

    def test_missing_profile_raises(self, fixtures_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Profile not found"):
            load_config("sample_filters.yaml", profile="nope", base_path=fixtures_path)

    def test_apply_profile_does_not_modify_base(self) -> None:
        base = {"fields": {"title": "builtins.str.strip"}, "version": "1.0"}

        result = apply_profile(
            base,
            {"fields": {"title": ["builtins.str.lower"]}, "version": "2.0"},
        )

        assert result == {
            "fields": {"title": ["builtins.str.strip", "builtins.str.lower"]},
            "version": "2.0",
        }
        assert base == {"fields": {"title": "builtins.str.strip"}, "version": "1.0"}
