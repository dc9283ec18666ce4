from rodgame.items import ItemManager


def test_items_fill_slots_in_order():
    manager = ItemManager()
    assert manager.add_item("a")
    assert manager.add_item("b")
    assert manager.slots == ("a", "b", None)
    assert manager.item_count == 2


def test_fourth_item_is_refused():
    manager = ItemManager()
    for item in ("a", "b", "c"):
        manager.add_item(item)
    assert manager.add_item("d") is False
    assert manager.slots == ("a", "b", "c")


def test_use_item_frees_slot_for_reuse():
    manager = ItemManager()
    for item in ("a", "b", "c"):
        manager.add_item(item)
    assert manager.use_item(1) is True
    assert manager.get_item(1) is None
    manager.add_item("d")
    assert manager.slots == ("a", "d", "c")


def test_use_empty_or_missing_slot_returns_false():
    manager = ItemManager()
    assert manager.use_item(0) is False
    assert manager.use_item(7) is False
    assert manager.get_item(-1) is None


def test_active_items_are_taken_once():
    manager = ItemManager()
    manager.add_item("x", active=True)
    manager.add_item("y", True)
    assert manager.slots == (None, None, None)
    assert manager.take_active_items() == ["x", "y"]
    assert manager.take_active_items() == []


def test_clear_all_empties_slots_and_allows_new_items():
    manager = ItemManager()
    for item in ("a", "b", "c"):
        manager.add_item(item)
    manager.clear_all()
    assert manager.item_count == 0
    assert manager.add_item("z") is True
    assert manager.get_item(0) == "z"