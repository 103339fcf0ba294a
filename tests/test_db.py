"""
Tests for the shelf and item persistence functions.
"""

from sqlalchemy import func, select

from pantry.db.engine import get_engine
from pantry.db.items import create_shelf_item, delete_shelf_item, list_items
from pantry.db.shelves import (
    DEFAULT_SHELF_NAME,
    create_shelf,
    delete_shelf,
    get_all_shelves,
    get_shelf,
    save_shelf_name,
)
from pantry.db.schema import items


def make_shelf(name):
    shelf = create_shelf()
    save_shelf_name(shelf.id, name)
    return shelf.id


def test_create_shelf_uses_default_name(db_url):
    shelf = create_shelf()

    assert shelf.name == DEFAULT_SHELF_NAME
    assert shelf.items == []
    assert get_shelf(shelf.id).name == DEFAULT_SHELF_NAME


def test_search_is_case_insensitive_substring(db_url):
    make_shelf("Dairy")
    make_shelf("Fridge")
    make_shelf("Dry goods")

    names = {shelf.name for shelf in get_all_shelves("DR")}
    assert names == {"Dry goods"}

    names = {shelf.name for shelf in get_all_shelves("d")}
    assert names == {"Dairy", "Fridge", "Dry goods"}


def test_blank_search_returns_everything(db_url):
    make_shelf("Dairy")
    make_shelf("Fridge")

    assert len(get_all_shelves(None)) == 2
    assert len(get_all_shelves("   ")) == 2


def test_search_escapes_wildcards(db_url):
    make_shelf("100% juice")
    make_shelf("Fridge")

    assert [shelf.name for shelf in get_all_shelves("%")] == ["100% juice"]


def test_shelf_items_are_sorted_by_name(db_url):
    shelf_id = make_shelf("Dairy")
    for name in ["Milk", "Butter", "Eggs"]:
        create_shelf_item(shelf_id, name)

    (shelf,) = get_all_shelves()
    assert [item.name for item in shelf.items] == ["Butter", "Eggs", "Milk"]


def test_rename_missing_shelf(db_url):
    assert save_shelf_name("nope", "Dairy") is None


def test_delete_shelf_removes_items(db_url):
    shelf_id = make_shelf("Dairy")
    item = create_shelf_item(shelf_id, "Milk")

    deleted = delete_shelf(shelf_id)

    assert deleted.name == "Dairy"
    assert [i.name for i in deleted.items] == ["Milk"]
    assert get_shelf(shelf_id) is None
    assert delete_shelf_item(item.id) is None
    assert delete_shelf(shelf_id) is None


def test_list_items(db_url):
    shelf_id = make_shelf("Dairy")
    create_shelf_item(shelf_id, "Milk")
    create_shelf_item(shelf_id, "Oat milk")
    create_shelf_item(shelf_id, "Eggs")

    assert [i.name for i in list_items(shelf_id)] == ["Eggs", "Milk", "Oat milk"]
    assert [i.name for i in list_items(shelf_id, "MILK")] == ["Milk", "Oat milk"]
    assert list_items("nope") is None


def test_create_item_on_missing_shelf(db_url):
    assert create_shelf_item("nope", "Milk") is None


def test_delete_item(db_url):
    shelf_id = make_shelf("Dairy")
    item = create_shelf_item(shelf_id, "Milk")

    assert delete_shelf_item(item.id).name == "Milk"
    assert list_items(shelf_id) == []


def test_delete_shelf_reports_every_removed_item(db_url):
    shelf_id = make_shelf("Dairy")
    for name in ["Milk", "Eggs", "Butter"]:
        create_shelf_item(shelf_id, name)

    deleted = delete_shelf(shelf_id)

    assert [i.name for i in deleted.items] == ["Butter", "Eggs", "Milk"]
    with get_engine().connect() as conn:
        remaining = conn.execute(
            select(func.count()).select_from(items).where(items.c.shelf_id == shelf_id)
        ).scalar_one()
    assert remaining == 0
