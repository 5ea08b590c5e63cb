"""Layered configuration.

A ``ConfigOverlay`` holds named ``Config`` layers. Lookups scan the layers
from highest to lowest priority and return the first match:

1. the ``process`` layer (values set at runtime through ``set``),
2. contexts added with ``add_context``, most recently added first,
3. the ``default`` layer.

Keys are dotted paths into nested mappings, e.g. ``env.home``.
"""
import copy
from typing import Any, Iterator
from ..exceptions import ConfigKeyMissingError
DEFAULT_CONTEXT = 'default'
PROCESS_CONTEXT = 'process'

class _Missing:

    def __repr__(self) -> str:
        return 'MISSING'
MISSING: Any = _Missing()

def _split(key: str) -> list[str]:
    return key.split('.')

def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result

class Config:

    def __init__(self, data: dict[str, Any] | None=None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(data) if data else {}

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in _split(key):
            if not isinstance(node, dict) or part not in node:
                return MISSING
            node = node[part]
        return node

    def has(self, key: str) -> bool:
        return self._lookup(key) is not MISSING

    def get(self, key: str, default: Any=None) -> Any:
        value = self._lookup(key)
        return default if value is MISSING else value

    def set(self, key: str, value: Any) -> None:
        parts = _split(key)
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value

    def export(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)

    def import_data(self, data: dict[str, Any]) -> None:
        self._data = copy.deepcopy(data)

class ConfigOverlay:

    def __init__(self) -> None:
        self._contexts: dict[str, Config] = {DEFAULT_CONTEXT: Config(), PROCESS_CONTEXT: Config()}

    def add_context(self, name: str, config: Config) -> 'ConfigOverlay':
        if name in (DEFAULT_CONTEXT, PROCESS_CONTEXT):
            self._contexts[name] = config
            return self
        # Replacing a context keeps its position
        if name in self._contexts:
            self._contexts[name] = config
            return self
        process = self._contexts.pop(PROCESS_CONTEXT)
        self._contexts[name] = config
        self._contexts[PROCESS_CONTEXT] = process
        return self

    def add_placeholder(self, name: str) -> 'ConfigOverlay':
        return self.add_context(name, Config())

    def has_context(self, name: str) -> bool:
        return name in self._contexts

    def get_context(self, name: str) -> Config:
        if name not in self._contexts:
            self.add_placeholder(name)
        return self._contexts[name]

    def remove_context(self, name: str) -> None:
        if name in (DEFAULT_CONTEXT, PROCESS_CONTEXT):
            self._contexts[name] = Config()
            return
        self._contexts.pop(name, None)

    def context_names(self) -> list[str]:
        """Context names from highest to lowest priority."""
        return list(reversed(self._contexts))

    def _by_priority(self) -> Iterator[Config]:
        for name in self.context_names():
            yield self._contexts[name]

    def find_context(self, key: str) -> Config | None:
        for config in self._by_priority():
            if config.has(key):
                return config
        return None

    def has(self, key: str) -> bool:
        return self.find_context(key) is not None

    def get(self, key: str, default: Any=MISSING) -> Any:
        config = self.find_context(key)
        if config is not None:
            return config.get(key)
        if default is MISSING:
            raise ConfigKeyMissingError(f"Configuration key '{key}' is not defined in any context", {'key': key, 'contexts': self.context_names()})
        return default

    def set(self, key: str, value: Any) -> 'ConfigOverlay':
        self._contexts[PROCESS_CONTEXT].set(key, value)
        return self

    def get_default(self, key: str, default: Any=None) -> Any:
        return self._contexts[DEFAULT_CONTEXT].get(key, default)

    def set_default(self, key: str, value: Any) -> 'ConfigOverlay':
        self._contexts[DEFAULT_CONTEXT].set(key, value)
        return self

    def export(self) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for name in self._contexts:
            merged = _merge(merged, self._contexts[name].export())
        return merged
