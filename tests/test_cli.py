from __future__ import annotations

from pathlib import Path
import argparse
import json
import types
import sys

import pytest

from plated import cli
from plated.config import AssetsConfig, EffectiveConfig, TuiConfig
from plated.errors import PageNotFoundError, PlatedError
from tests.utils import write_global_config, write_project_config


@pytest.fixture()
def base_args(example_document_path: Path, tmp_path: Path, temp_home: Path) -> list[str]:
    return ["--document", str(example_document_path), "--project", str(tmp_path)]


def test_cli_no_command() -> None:
    called = {}

    def fake_tui(*args, **kwargs):
        called["ok"] = True
        return 0

    monkeypatch = pytest.MonkeyPatch()
    monkeypatch.setattr(cli, "_cmd_tui", fake_tui)
    try:
        assert cli.main([]) == 0
        assert called.get("ok") is True
    finally:
        monkeypatch.undo()


def test_cli_tui_flag(monkeypatch) -> None:
    monkeypatch.setattr("plated.cli._cmd_tui", lambda *a, **k: 0)
    assert cli.main(["--tui"]) == 0


def test_cmd_tui_invokes_run(monkeypatch) -> None:
    calls = {}

    def fake_run_tui(cfg: EffectiveConfig) -> int:
        calls["cfg"] = cfg
        return 0

    cfg = EffectiveConfig(
        document="recipes.json",
        site_title="Plated Memories",
        fetch_timeout=10.0,
        log_level="WARNING",
        default_project=None,
        assets=AssetsConfig(),
        tui=TuiConfig(header_icon="🍳"),
        project_dir="/p",
    )
    monkeypatch.setattr(cli, "resolve_config", lambda *a, **k: cfg)
    monkeypatch.setitem(sys.modules, "plated.tui", types.SimpleNamespace(run_tui=fake_run_tui))
    rc = cli._cmd_tui(argparse.Namespace())
    assert rc == 0
    assert calls["cfg"] is cfg


def test_cli_home(base_args: list[str], capsys) -> None:
    rc = cli.main(["home", *base_args])
    assert rc == 0
    out = capsys.readouterr().out
    assert out.startswith("Plated Memories\n")
    assert "- Hummus  [recipe.html?category=appetizers&id=1]" in out


def test_cli_options_before_command(base_args: list[str], capsys) -> None:
    rc = cli.main([*base_args, "sources"])
    assert rc == 0
    assert "- Nana  [category.html?source=Nana]" in capsys.readouterr().out


def test_cli_category_json(base_args: list[str], capsys) -> None:
    rc = cli.main(["category", "mains", "--json", *base_args])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["page_title"] == "Mains - Plated Memories"
    assert [recipe["name"] for recipe in data["recipes"]] == ["Beef Stew", "ćevapi", "Chicken Curry"]


def test_cli_site_title_from_project(example_document_path: Path, tmp_path: Path, temp_home: Path, capsys) -> None:
    write_project_config(tmp_path, "site_title = \"Nana's Kitchen\"\n")
    rc = cli.main(["recipe", "mains", "1", "--document", str(example_document_path), "--project", str(tmp_path)])
    assert rc == 0
    out = capsys.readouterr().out
    assert out.startswith("Beef Stew\n")
    assert "Category: Mains" in out


def test_cli_appendix(base_args: list[str], capsys) -> None:
    assert cli.main(["appendix", *base_args]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Index\n")
    assert "Vegetarian" in out


def test_cli_source(base_args: list[str], capsys) -> None:
    assert cli.main(["source", "Yotam Ottolenghi", *base_args]) == 0
    assert "- Hummus  [recipe.html?category=appetizers&id=1]" in capsys.readouterr().out


def test_cli_search(base_args: list[str], capsys) -> None:
    assert cli.main(["search", "dinner", *base_args]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "- Beef Stew  [recipe.html?category=mains&id=1]",
        "- Chicken Curry  [recipe.html?category=mains&id=2]",
    ]


def test_cli_search_multiple_words(base_args: list[str], capsys) -> None:
    assert cli.main(["search", "roast", "pot", *base_args]) == 0
    assert "Roast Potatoes" in capsys.readouterr().out


def test_cli_page(base_args: list[str], capsys) -> None:
    assert cli.main(["page", "category.html?source=Nana", *base_args]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Nana\n")
    assert "ćevapi" in out


def test_cli_recipe_not_found(base_args: list[str], capsys) -> None:
    assert cli.main(["recipe", "mains", "99", *base_args]) == 5
    assert "Recipe not found" in capsys.readouterr().err


def test_cli_recipe_bad_id(base_args: list[str]) -> None:
    assert cli.main(["recipe", "mains", "abc", *base_args]) == 5


def test_cli_category_not_found(base_args: list[str], capsys) -> None:
    assert cli.main(["category", "breakfast", *base_args]) == 4
    assert "Category not found" in capsys.readouterr().err


def test_cli_unknown_page(base_args: list[str]) -> None:
    assert cli.main(["page", "about.html", *base_args]) == 4


def test_cli_missing_document(tmp_path: Path, temp_home: Path) -> None:
    rc = cli.main(["home", "--project", str(tmp_path), "--document", "missing.json"])
    assert rc == 3


def test_cli_bad_timeout(base_args: list[str]) -> None:
    assert cli.main(["home", "--timeout", "0", *base_args]) == 2


def test_cli_config_prints(temp_home: Path, tmp_path: Path, capsys) -> None:
    write_global_config(temp_home, "site_title = 'Sunday Lunch'\n")
    rc = cli.main(["config", "--project", str(tmp_path)])
    assert rc == 0
    out = capsys.readouterr().out
    assert "site_title = 'Sunday Lunch'" in out
    assert "[assets]" in out


def test_cli_config_error(temp_home: Path, tmp_path: Path) -> None:
    write_global_config(temp_home, "bad = ")
    rc = cli.main(["config", "--project", str(tmp_path)])
    assert rc == 2


def test_exit_codes() -> None:
    assert cli._exit_code(PlatedError("x")) == 1
    assert cli._exit_code(PageNotFoundError("x")) == 4


def test_cli_bad_avatar_template(base_args: list[str]) -> None:
    assert cli.main(["sources", "--avatar-template", "a/{name}/{size}.jpg", *base_args]) == 2
