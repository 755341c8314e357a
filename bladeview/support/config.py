"""
Config Repository - Laravel-style configuration access
Access configuration values using dot notation
"""
import copy
from typing import Any, Dict, Optional

from bladeview.exceptions import ConfigKeyNotFoundException

_MISSING = object()


class Repository:
    """
    Immutable configuration store with dot notation access

    Usage:
        config = Repository({
            'view.paths': ['/app/views'],
            'view.compiled': '/app/cache',
        })

        # Flat dotted keys are matched first
        paths = config.get('view.paths')

        # Nested mappings are walked segment by segment
        config = Repository({'view': {'compiled': '/app/cache'}})
        cache = config.get('view.compiled')

        # With default
        ext = config.get('view.extensions', ['tpl'])

        # Check existence
        if config.has('view.paths'):
            ...
    """

    def __init__(self, items: Optional[Dict[str, Any]] = None):
        # Deep copy so later mutation of the caller's mapping is not observed
        self._items: Dict[str, Any] = copy.deepcopy(dict(items or {}))

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """
        Get configuration value using dot notation

        Args:
            key: Config key in dot notation (e.g., 'view.paths')
            default: Value returned when the key is missing

        Returns:
            Configuration value or default

        Raises:
            ConfigKeyNotFoundException: If the key is missing and no default was given
        """
        value = self._lookup(key)

        if value is _MISSING:
            if default is _MISSING:
                raise ConfigKeyNotFoundException(
                    f"Config key '{key}' not found", key=key
                )
            return default

        return value

    def _lookup(self, key: str) -> Any:
        """Resolve a key, trying the flat key before nested navigation"""
        if key in self._items:
            return self._items[key]

        value: Any = self._items
        for part in key.split('.'):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return _MISSING

        return value

    def has(self, key: str) -> bool:
        """
        Check if configuration key exists

        Example:
            if config.has('view.compiled'):
                ...
        """
        return self._lookup(key) is not _MISSING

    def all(self) -> Dict[str, Any]:
        """Get a copy of all configuration items"""
        return copy.deepcopy(self._items)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __repr__(self):
        keys = ', '.join(sorted(self._items))
        return f'Repository({keys})'
