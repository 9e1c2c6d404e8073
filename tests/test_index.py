from __future__ import annotations

import pytest

from plated.domain import RecipeDocument, parse_document, parse_recipe
from plated.errors import CategoryNotFoundError, NotFoundError, RecipeNotFoundError
from plated.index import (
    RecipeIndex,
    build_flat_list,
    build_tag_index,
    display_source_key,
    find_by_id,
    find_by_source,
    source_key,
    unique_sources,
)


def test_flat_list_covers_every_recipe_in_order(document: RecipeDocument) -> None:
    flat = build_flat_list(document)
    assert len(flat) == sum(len(category.recipes) for category in document.categories)
    assert [item.name for item in flat] == [
        "Hummus",
        "Bruschetta",
        "Beef Stew",
        "Chicken Curry",
        "ćevapi",
        "Apple Pie",
        "Brownies",
        "Roast Potatoes",
    ]
    for item in flat:
        assert item.recipe in document[item.category].recipes


def test_tag_index_membership(document: RecipeDocument) -> None:
    tags = build_tag_index(document)
    for item in build_flat_list(document):
        own = {tag.lower() for tag in item.tags}
        for tag, bucket in tags.items():
            assert (item in bucket) == (tag in own)


def test_tag_index_is_lower_cased_and_merges_case(document: RecipeDocument) -> None:
    tags = build_tag_index(document)
    assert all(tag == tag.lower() for tag in tags)
    assert [item.name for item in tags["dinner"]] == ["Beef Stew", "Chicken Curry"]
    assert [item.name for item in tags["quick"]] == ["Hummus", "Bruschetta"]


def test_tag_index_skips_recipes_without_tags(document: RecipeDocument) -> None:
    tags = build_tag_index(document)
    assert not any(item.name == "Brownies" for bucket in tags.values() for item in bucket)


def test_tag_index_lists_duplicate_tag_once() -> None:
    doc = parse_document({"mains": {"title": "Mains", "recipes": [{"id": 1, "name": "Stew", "tags": ["Dinner", "dinner"]}]}})
    assert len(build_tag_index(doc)["dinner"]) == 1


def test_find_by_id_is_category_scoped(scenario_document: RecipeDocument) -> None:
    assert find_by_id(scenario_document, "mains", 1).name == "Beef Stew"
    assert find_by_id(scenario_document, "desserts", 1).name == "Apple Pie"


def test_find_by_id_does_not_cross_categories(document: RecipeDocument) -> None:
    assert find_by_id(document, "sides", 7).name == "Roast Potatoes"
    with pytest.raises(RecipeNotFoundError):
        find_by_id(document, "mains", 7)


def test_find_by_id_missing_category(document: RecipeDocument) -> None:
    with pytest.raises(CategoryNotFoundError):
        find_by_id(document, "breakfast", 1)
    with pytest.raises(NotFoundError):
        find_by_id(document, None, 1)


def test_find_by_id_without_id(document: RecipeDocument) -> None:
    with pytest.raises(RecipeNotFoundError):
        find_by_id(document, "mains", None)


def test_source_key_rules() -> None:
    family = parse_recipe({"id": 1, "name": "Stew", "source": "family", "sourceText": "Nana"})
    bare_family = parse_recipe({"id": 2, "name": "Soup", "source": "family"})
    cookbook = parse_recipe({"id": 3, "name": "Dip", "source": "cookbook", "sourceText": "Jerusalem - Yotam Ottolenghi"})
    assert source_key(family) == "Nana"
    assert source_key(bare_family) == "family"
    assert source_key(cookbook) == "cookbook"
    assert display_source_key(cookbook) == "Yotam Ottolenghi"


def test_display_source_key_without_separator() -> None:
    cookbook = parse_recipe({"id": 1, "name": "Brownies", "source": "cookbook", "sourceText": "Salt Fat Acid Heat"})
    assert display_source_key(cookbook) == "Salt Fat Acid Heat"
    assert display_source_key(parse_recipe({"id": 2, "name": "Toast"})) is None


def test_find_by_source(document: RecipeDocument) -> None:
    assert [item.name for item in find_by_source(document, "Nana")] == ["Beef Stew", "ćevapi"]
    assert [item.name for item in find_by_source(document, "cookbook")] == ["Hummus", "Brownies"]
    assert find_by_source(document, "Nobody") == []


def test_unique_sources_sorted_and_deduplicated(document: RecipeDocument) -> None:
    sources = unique_sources(document)
    assert sources == sorted(set(sources))
    assert sources == [
        "Grandpa Joe",
        "Nana",
        "Salt Fat Acid Heat",
        "Yotam Ottolenghi",
        "instagram",
        "youtube",
    ]


def test_recipe_index_matches_functions(document: RecipeDocument) -> None:
    index = RecipeIndex(document)
    assert list(index.recipes) == build_flat_list(document)
    assert index.tag_index() == build_tag_index(document)
    assert index.unique_sources() == unique_sources(document)
    assert index.find_by_source("Nana") == find_by_source(document, "Nana")
    assert [item.name for item in index.find_by_display_source("Yotam Ottolenghi")] == ["Hummus"]


def test_recipe_index_hands_out_copies(index: RecipeIndex) -> None:
    first = index.tag_index()
    first["comfort"].clear()
    first["new"] = []
    second = index.tag_index()
    assert len(second["comfort"]) == 3
    assert "new" not in second


def test_building_twice_is_deterministic(raw_document: dict) -> None:
    first = build_tag_index(parse_document(raw_document))
    second = build_tag_index(parse_document(raw_document))
    assert first == second
    assert list(first) == list(second)
