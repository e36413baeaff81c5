"""Tests for ResnameSettings."""

import pytest
from pydantic import ValidationError

from resname.config.settings import ResnameSettings


class TestResnameSettings:
    def test_defaults(self) -> None:
        settings = ResnameSettings.from_cli()
        assert settings.max_length == 255
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = ResnameSettings.from_cli()
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESNAME_MAX_LENGTH", "63")
        monkeypatch.setenv("RESNAME_LOG_JSON", "true")
        settings = ResnameSettings.from_cli()
        assert settings.max_length == 63
        assert settings.log_json is True

    def test_cli_flag_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESNAME_MAX_LENGTH", "63")
        assert ResnameSettings.from_cli(max_length=100).max_length == 100

    def test_none_flags_fall_through(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESNAME_MAX_LENGTH", "63")
        assert ResnameSettings.from_cli(max_length=None).max_length == 63

    @pytest.mark.parametrize("value", [0, -1])
    def test_max_length_must_be_positive(self, value: int) -> None:
        with pytest.raises(ValidationError):
            ResnameSettings.from_cli(max_length=value)
