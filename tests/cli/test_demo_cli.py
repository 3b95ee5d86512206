"""Tests for stockroom.cli: demo walkthrough via CliRunner."""

from __future__ import annotations

import json

import pytest
import structlog
from typer.testing import CliRunner

from stockroom import __version__
from stockroom.cli.app import app
from stockroom.cli.demo import build_warehouse, run_walkthrough, seed_warehouse
from stockroom.core.errors import DuplicateKeyError

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"stockroom {__version__}" in result.output


class TestDemoCommand:
    def test_demo_runs(self):
        result = runner.invoke(app, ["demo", "--console-logs"])
        assert result.exit_code == 0, result.output
        assert "Grocery Items" in result.output
        assert "Electronic Items" in result.output
        assert "DUPLICATE_KEY" in result.output
        assert "NOT_FOUND" in result.output
        assert "INVALID_QUANTITY" in result.output

    def test_demo_json_logs(self):
        result = runner.invoke(app, ["demo", "--json-logs"])
        assert result.exit_code == 0, result.output
        assert '"event": "demo_completed"' in result.output

    @pytest.mark.parametrize("log_flag", ["--console-logs", "--json-logs"])
    def test_json_report_is_one_document(self, log_flag):
        result = runner.invoke(app, ["demo", "--json", log_flag])
        assert result.exit_code == 0, result.output

        report = json.loads(result.stdout)
        assert set(report) == {"before", "steps", "after"}
        assert [i["quantity"] for i in report["before"]["groceries"]] == [50, 30]
        assert [i["quantity"] for i in report["after"]["groceries"]] == [50, 20]
        assert [i["quantity"] for i in report["after"]["electronics"]] == [10, 25]

        kinds = {s["step"]: s.get("error", {}).get("kind") for s in report["steps"]}
        assert kinds == {
            "duplicate_add": "DUPLICATE_KEY",
            "remove_missing": "NOT_FOUND",
            "negative_update": "INVALID_QUANTITY",
            "restock_smartphone": None,
            "sell_milk": None,
        }

    def test_json_report_sends_logs_to_stderr(self):
        result = runner.invoke(app, ["demo", "--json", "--json-logs"])
        assert "demo_completed" not in result.stdout
        assert "demo_completed" in result.stderr

    def test_bad_log_level_is_usage_error(self):
        result = runner.invoke(app, ["demo", "--log-level", "verbose"])
        assert result.exit_code == 2
        assert "Invalid value" in result.output

    def test_log_level_option_is_case_insensitive(self):
        result = runner.invoke(app, ["demo", "--log-level", "error", "--json-logs"])
        assert result.exit_code == 0, result.output
        assert "stock_adjusted" not in result.output

    def test_demo_respects_env_level(self, monkeypatch):
        monkeypatch.setenv("STOCKROOM_LOG_LEVEL", "ERROR")
        result = runner.invoke(app, ["demo", "--json-logs"])
        assert result.exit_code == 0, result.output
        assert "stock_adjusted" not in result.output


class TestWarehouseHelpers:
    def test_seeded_quantities_after_walkthrough_steps(self):
        manager = build_warehouse()
        seed_warehouse(manager)
        electronics = manager.repository("electronics")
        groceries = manager.repository("groceries")

        assert manager.increase_stock(electronics, 2, 5).quantity == 25
        assert manager.increase_stock(groceries, 101, -10).quantity == 20

    def test_reseeding_raises_duplicate(self):
        manager = build_warehouse()
        seed_warehouse(manager)
        with pytest.raises(DuplicateKeyError):
            seed_warehouse(manager)

    def test_walkthrough_report_serializes_results_and_outcomes(self):
        report = run_walkthrough(build_warehouse())
        steps = {s["step"]: s for s in report["steps"]}

        assert steps["duplicate_add"]["ok"] is False
        assert steps["negative_update"]["error"]["quantity"] == -5
        assert steps["remove_missing"]["succeeded"] is False
        assert steps["sell_milk"] == {
            "step": "sell_milk",
            "action": "adjust",
            "item_id": 101,
            "succeeded": True,
            "quantity": 20,
        }
        assert "seed" not in steps
