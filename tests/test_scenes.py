import pytest

from rodgame.scenes import SceneManager, ViewManager


class FakeScene:
    def __init__(self, tag, journal):
        self.tag = tag
        self.journal = journal

    def on_load_resources(self):
        self.journal.append((self.tag, "load_resources"))

    def on_load_objects(self):
        self.journal.append((self.tag, "load_objects"))

    def on_unload_objects(self):
        self.journal.append((self.tag, "unload_objects"))

    def on_unload_resources(self):
        self.journal.append((self.tag, "unload_resources"))


class FakeView:
    def __init__(self, tag):
        self.tag = tag


def test_load_is_deferred_until_check():
    journal = []
    manager = SceneManager()
    menu = FakeScene("menu", journal)
    manager.register_scene(menu)
    manager.load_scene("menu")
    assert manager.loading is True
    assert manager.is_loaded("menu") is False
    manager.check_load_scene()
    assert manager.active_scene is menu
    assert manager.is_loaded("menu") is True
    assert manager.loading is False
    assert journal == [("menu", "load_resources"), ("menu", "load_objects")]


def test_switch_unloads_previous_scene_first():
    journal = []
    manager = SceneManager()
    manager.register_scene(FakeScene("menu", journal))
    manager.register_scene(FakeScene("game", journal))
    manager.load_scene("menu")
    manager.check_load_scene()
    journal.clear()
    manager.load_scene("game")
    manager.check_load_scene()
    assert journal == [
        ("menu", "unload_objects"),
        ("menu", "unload_resources"),
        ("game", "load_resources"),
        ("game", "load_objects"),
    ]
    assert manager.is_loaded("game") and not manager.is_loaded("menu")


def test_check_without_request_does_nothing():
    journal = []
    manager = SceneManager()
    manager.register_scene(FakeScene("menu", journal))
    manager.check_load_scene()
    assert journal == []
    assert manager.active_scene is None


def test_unknown_scene_raises():
    manager = SceneManager()
    manager.load_scene("nowhere")
    with pytest.raises(KeyError):
        manager.check_load_scene()


def test_view_registry_round_trip():
    views = ViewManager()
    view = FakeView("game_over")
    views.register_view(view)
    assert views.get_view("game_over") is view
    views.unregister_view(view)
    with pytest.raises(KeyError):
        views.get_view("game_over")