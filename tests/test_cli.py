from __future__ import annotations

import json
import types

import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from cli.main import app
from core.domain.models import ExampleRun
from core.domain.taxonomy import Variant
from core.errors import ExampleFailedError
from core.services import example_runner

runner = CliRunner()


class TestListAndShow:
    def test_list_shows_patterns(self):
        result = runner.invoke(app, ["--no-banner", "list"])
        assert result.exit_code == 0
        assert "observer" in result.output
        assert "visitor" in result.output

    def test_list_filters_by_category(self):
        result = runner.invoke(app, ["--no-banner", "list", "--category", "creational"])
        assert result.exit_code == 0
        assert "builder" in result.output
        assert "visitor" not in result.output

    def test_banner_is_printed_by_default(self):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "PATTERN CATALOG" in result.output

    def test_show_resolves_aliases(self):
        result = runner.invoke(app, ["--no-banner", "show", "cor"])
        assert result.exit_code == 0
        assert "Chain of Responsibility" in result.output
        assert "patterns.chain_of_responsibility.real_world" in result.output

    def test_show_unknown_pattern_exits_with_bad_input(self):
        result = runner.invoke(app, ["--no-banner", "show", "obsrver"])
        assert result.exit_code == 1
        assert "observer" in result.output

    def test_show_reports_broken_example_module(self, monkeypatch):
        def broken_import(name):
            raise RuntimeError("boom at import")

        monkeypatch.setattr(example_runner, "importlib", types.SimpleNamespace(import_module=broken_import))

        result = runner.invoke(app, ["--no-banner", "show", "facade"])

        assert result.exit_code == 1
        assert "boom at import" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)


class TestRun:
    def test_run_quiet_prints_raw_output(self):
        result = runner.invoke(app, ["--no-banner", "run", "builder", "--variant", "real-world", "--quiet"])
        assert result.exit_code == 0
        assert "SELECT name, email, password FROM users WHERE age > '18' AND age < '30' LIMIT 10, 20;" in result.output

    def test_run_defaults_to_the_only_variant(self):
        result = runner.invoke(app, ["--no-banner", "run", "interpreter", "-q"])
        assert result.exit_code == 0
        assert "A ∧ (B ∨ C) = true" in result.output

    def test_run_missing_variant_is_bad_input(self):
        result = runner.invoke(app, ["--no-banner", "run", "interpreter", "--variant", "conceptual"])
        assert result.exit_code == 1

    def test_run_unknown_variant_is_bad_input(self):
        result = runner.invoke(app, ["--no-banner", "run", "builder", "--variant", "fancy"])
        assert result.exit_code == 1

    def test_run_all_variants_exports_json(self, tmp_path):
        out = tmp_path / "state.json"
        result = runner.invoke(app, ["--no-banner", "run", "state", "--all-variants", "-q", "--json", str(out)])

        assert result.exit_code == 0
        payload = json.loads(out.read_text(encoding="utf-8"))
        assert [run["variant"] for run in payload["runs"]] == ["conceptual", "real_world"]

    def test_failing_example_exits_with_two(self, monkeypatch):
        def failing(info, variant, **kwargs):
            raise ExampleFailedError(
                ExampleRun(
                    pattern=info.name,
                    variant=variant,
                    module=info.module_for(variant),
                    output="half",
                    succeeded=False,
                    error="RuntimeError: boom",
                )
            )

        monkeypatch.setattr(cli_main, "run_example", failing)
        result = runner.invoke(app, ["--no-banner", "run", "builder"])

        assert result.exit_code == 2
        assert "RuntimeError: boom" in result.output


class TestRunAll:
    def test_run_all_by_category_with_html(self, tmp_path):
        out = tmp_path / "report.html"
        result = runner.invoke(
            app,
            ["--no-banner", "run-all", "--category", "creational", "--variant", "conceptual", "--html", str(out)],
        )

        assert result.exit_code == 0
        assert "OK builder/conceptual" in result.output
        assert out.exists()

    def test_bad_log_level_is_rejected(self):
        result = runner.invoke(app, ["--log-level", "LOUD", "--no-banner", "list"])
        assert result.exit_code == 1


class TestDoctor:
    def test_doctor_skip_examples(self):
        result = runner.invoke(app, ["--no-banner", "doctor", "run", "--skip-examples"])
        assert result.exit_code == 0, result.output
        assert "Bundled datasets" in result.output
        assert "SKIPPED" in result.output

    @pytest.mark.parametrize("offline, expected", [("y", "true"), ("n", "false")])
    def test_doctor_configure_writes_user_env(self, tmp_path, monkeypatch, offline, expected):
        env_path = tmp_path / "user.env"
        monkeypatch.setattr(cli_main.doctor, "write_user_env_vars", lambda values: _write(env_path, values))

        result = runner.invoke(app, ["--no-banner", "doctor", "configure"], input=f"\n{offline}\ninfo\n")

        assert result.exit_code == 0, result.output
        text = env_path.read_text(encoding="utf-8")
        assert f"PATTERN_CATALOG_OFFLINE_HTTP={expected}" in text
        assert "PATTERN_CATALOG_LOG_LEVEL=INFO" in text


def _write(path, values):
    path.write_text("".join(f"{k}={v}\n" for k, v in values.items()), encoding="utf-8")
    return path
