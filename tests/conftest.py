from __future__ import annotations

import json
from pathlib import Path
import sys
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from plated.domain import RecipeDocument, parse_document  # noqa: E402
from plated.index import RecipeIndex  # noqa: E402


@pytest.fixture()
def example_document_path() -> Path:
    return ROOT / "fixtures" / "recipes.json"


@pytest.fixture()
def raw_document(example_document_path: Path) -> dict[str, Any]:
    return json.loads(example_document_path.read_text(encoding="utf-8"))


@pytest.fixture()
def document(raw_document: dict[str, Any]) -> RecipeDocument:
    return parse_document(raw_document)


@pytest.fixture()
def index(document: RecipeDocument) -> RecipeIndex:
    return RecipeIndex(document)


@pytest.fixture()
def scenario_document() -> RecipeDocument:
    return parse_document(
        {
            "mains": {
                "title": "Mains",
                "recipes": [{"id": 1, "name": "Beef Stew", "tags": ["dinner", "comfort"]}],
            },
            "desserts": {
                "title": "Desserts",
                "recipes": [{"id": 1, "name": "Apple Pie", "tags": ["dessert", "comfort"]}],
            },
        }
    )


@pytest.fixture()
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path
