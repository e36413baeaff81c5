"""Tests for format_result and OutputSettings."""

import json

from resname.output.formatters import OutputSettings, format_result
from resname.services.result import ServiceError, ServiceResult


def _ok(**data: object) -> ServiceResult:
    return ServiceResult(ok=True, op="validate_names", data=dict(data))


def _err(msg: str = "fail", **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="validate_names",
        error=ServiceError(code="NON_ASCII", message=msg, detail=dict(detail)),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok(count=1), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "validate_names"
        assert data["data"]["count"] == 1

    def test_json_mode_error(self) -> None:
        output = format_result(_err("Bad"), json_output=True)
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"
        assert data["error"]["code"] == "NON_ASCII"

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(_ok(count=1), settings=OutputSettings(), json_output=True)
        assert output.startswith("OK: validate_names")


class TestFormatResultHuman:
    def test_ok_with_data(self) -> None:
        output = format_result(_ok(names=["a", "b"], count=2))
        lines = output.splitlines()
        assert lines[0] == "OK: validate_names"
        assert '  names: ["a","b"]' in lines
        assert "  count: 2" in lines

    def test_error_message(self) -> None:
        output = format_result(_err("Invalid value: 'x' contains non-ASCII characters."))
        assert output == (
            "ERROR: validate_names - Invalid value: 'x' contains non-ASCII characters."
        )

    def test_long_message_not_wrapped(self) -> None:
        message = "Invalid value: '" + "a" * 256 + "' exceeds the allowed limit of 255 characters."
        output = format_result(_err(message))
        assert "\n" not in output
        assert message in output

    def test_brackets_are_not_markup(self) -> None:
        output = format_result(_ok(names=["[bold]x[/bold]"]))
        assert '["[bold]x[/bold]"]' in output

    def test_verbose_error_shows_detail(self) -> None:
        output = format_result(_err("bad", index=3), settings=OutputSettings(verbose=True))
        assert "  index: 3" in output.splitlines()

    def test_non_verbose_error_hides_detail(self) -> None:
        output = format_result(_err("bad", index=3))
        assert "index" not in output


class TestFormatResultQuiet:
    def test_quiet_ok_lists_names(self) -> None:
        output = format_result(_ok(names=["a", "b"]), settings=OutputSettings(quiet=True))
        assert output == "a\nb"

    def test_quiet_error_is_message(self) -> None:
        output = format_result(_err("bad name"), settings=OutputSettings(quiet=True))
        assert output == "bad name"

    def test_quiet_no_names_is_empty(self) -> None:
        assert format_result(_ok(names=[]), settings=OutputSettings(quiet=True)) == ""
