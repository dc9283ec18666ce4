"""Scene switching and the registry of user-interface views."""

from __future__ import annotations

from typing import Any, Hashable, Optional, Protocol


class Scene(Protocol):
    """What the scene manager expects of a scene."""

    tag: Hashable

    def on_load_resources(self) -> None: ...

    def on_load_objects(self) -> None: ...

    def on_unload_objects(self) -> None: ...

    def on_unload_resources(self) -> None: ...


class SceneManager:
    """Registers scenes and swaps the active one at a safe point of the frame."""

    def __init__(self) -> None:
        self._scenes: dict[Hashable, Scene] = {}
        self._active: Optional[Scene] = None
        self._pending: Optional[Hashable] = None
        self._loading = False

    @property
    def active_scene(self) -> Optional[Scene]:
        return self._active

    @property
    def loading(self) -> bool:
        """True while a requested scene change has not been carried out yet."""
        return self._loading

    def register_scene(self, scene: Scene) -> None:
        self._scenes[scene.tag] = scene

    def load_scene(self, tag: Hashable) -> None:
        """Request a switch to the scene ``tag``; it happens on the next check."""
        self._loading = True
        self._pending = tag

    def unload_scene(self) -> None:
        if self._active is not None:
            self._active.on_unload_objects()
            self._active.on_unload_resources()

    def check_load_scene(self) -> None:
        """Carry out a pending scene switch; raise KeyError for an unknown scene."""
        if not self._loading:
            return
        try:
            scene = self._scenes[self._pending]
        except KeyError:
            raise KeyError(f"no scene registered for {self._pending!r}") from None
        self.unload_scene()
        self._active = scene
        scene.on_load_resources()
        scene.on_load_objects()
        self._loading = False

    def is_loaded(self, tag: Hashable) -> bool:
        return self._active is not None and self._scenes.get(tag) is self._active


class ViewManager:
    """Looks views up by their tag."""

    def __init__(self) -> None:
        self._views: dict[Hashable, Any] = {}

    def register_view(self, view: Any) -> None:
        self._views[view.tag] = view

    def unregister_view(self, view: Any) -> None:
        self._views.pop(view.tag, None)

    def get_view(self, tag: Hashable) -> Any:
        """Return the view registered for ``tag``; raise KeyError if there is none."""
        try:
            return self._views[tag]
        except KeyError:
            raise KeyError(f"no view registered for {tag!r}") from None