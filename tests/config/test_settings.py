"""Tests for LitcalSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from litcal.config.settings import LitcalSettings


class TestLitcalSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = LitcalSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.calendar.check_start_year == 1900
        assert settings.export.indent == 2

    def test_frozen(self, tmp_path: Path) -> None:
        settings = LitcalSettings.from_cli(search_from=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "litcal.toml"
        toml.write_text("[calendar]\ncheck_start_year = 2000\n[export]\nindent = 4\n")
        settings = LitcalSettings.from_cli(search_from=tmp_path)
        assert settings.calendar.check_start_year == 2000
        assert settings.calendar.check_end_year == 2100  # default preserved
        assert settings.export.indent == 4
        assert settings.config_path == toml

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "litcal.toml").write_text("[export]\nindent = 0\n")
        subdir = tmp_path / "sub" / "deep"
        subdir.mkdir(parents=True)
        settings = LitcalSettings.from_cli(search_from=subdir)
        assert settings.export.indent == 0

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "litcal.toml").write_text("")
        settings = LitcalSettings.from_cli(search_from=tmp_path)
        assert settings.export.indent == 2

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[calendar]\ncheck_end_year = 2030\n")
        settings = LitcalSettings.from_cli(config_path=str(custom), search_from=tmp_path)
        assert settings.calendar.check_end_year == 2030
        assert settings.config_path == custom

    def test_explicit_config_path_missing(self, tmp_path: Path) -> None:
        settings = LitcalSettings.from_cli(config_path=str(tmp_path / "absent.toml"))
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "litcal.toml").write_text("[calendar\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            LitcalSettings.from_cli(search_from=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = LitcalSettings.from_cli(
            search_from=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        """CLI flags take priority over TOML values."""
        (tmp_path / "litcal.toml").write_text("quiet = true\n")
        settings = LitcalSettings.from_cli(search_from=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_toml_top_level_flag(self, tmp_path: Path) -> None:
        (tmp_path / "litcal.toml").write_text("json_output = true\n")
        settings = LitcalSettings.from_cli(search_from=tmp_path)
        assert settings.json_output is True


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LITCAL_QUIET", "true")
        settings = LitcalSettings.from_cli(search_from=tmp_path)
        assert settings.quiet is True

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "litcal.toml").write_text("[export]\nindent = 4\n")
        monkeypatch.setenv("LITCAL_EXPORT__INDENT", "8")
        settings = LitcalSettings.from_cli(search_from=tmp_path)
        assert settings.export.indent == 8

    def test_nested_env_var_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LITCAL_CALENDAR__CHECK_END_YEAR", "2050")
        settings = LitcalSettings.from_cli(search_from=tmp_path)
        assert settings.calendar.check_end_year == 2050
        assert settings.calendar.check_start_year == 1900
