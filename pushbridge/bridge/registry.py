from typing import Any, Callable, Protocol

from pushbridge.core.errors import MethodNotFound, PluginNotFound

Handler = Callable[[dict[str, Any]], dict[str, Any]]


class Plugin(Protocol):
    name: str

    @property
    def methods(self) -> dict[str, Handler]: ...


class PluginRegistry:
    """Name -> method -> handler table owned by the host shell."""

    def __init__(self) -> None:
        self._plugins: dict[str, dict[str, Handler]] = {}

    def register(self, plugin: Plugin, name: str | None = None) -> None:
        name = name or plugin.name
        if name in self._plugins:
            raise ValueError(f"Plugin {name!r} already registered")
        self._plugins[name] = dict(plugin.methods)

    def is_available(self, name: str) -> bool:
        return name in self._plugins

    def names(self) -> list[str]:
        return sorted(self._plugins)

    def dispatch(self, name: str, method: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
        methods = self._plugins.get(name)
        if methods is None:
            raise PluginNotFound(name)
        handler = methods.get(method)
        if handler is None:
            raise MethodNotFound(f"{name}.{method}")
        return handler(payload or {})
