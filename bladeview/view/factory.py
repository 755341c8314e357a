"""
View Factory
Builds View instances and manages shared data, namespaces and view hooks
"""
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from bladeview.defaults import DEFAULT_EXTENSION_ENGINES
from bladeview.events.dispatcher import Dispatcher
from bladeview.exceptions import EngineNotFoundException, ViewNotFoundException
from bladeview.logging import getLogger
from bladeview.support.str import Str
from bladeview.view.engines.engine import Engine
from bladeview.view.engines.engine_resolver import EngineResolver
from bladeview.view.finder import FileViewFinder, Hints
from bladeview.view.runtime import pairs
from bladeview.view.view import View
from bladeview.view.view_name import ViewName

logger = getLogger(__name__)

Patterns = Union[str, Iterable[str]]


class Factory:
    """
    View factory

    Data precedence when making a view (highest first):
        merge_data > data > shared data

    Creators run when a matching view is made; composers run right before
    a matching view renders. Patterns match the normalized view name
    exactly or as a glob ('admin.*', 'mail::*').

    Example:
        factory.share('app_name', 'Acme')
        factory.composer('layouts.*', lambda view: view.with_('menu', menu))
        html = factory.make('pages.home', {'title': 'Home'}).render()
    """

    def __init__(
        self,
        engines: EngineResolver,
        finder: FileViewFinder,
        events: Dispatcher,
        extensions: Optional[Mapping[str, str]] = None
    ):
        self.engines = engines
        self.finder = finder
        self.events = events
        self.extensions: Dict[str, str] = dict(extensions or DEFAULT_EXTENSION_ENGINES)
        self.shared_data: Dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Making views
    # ------------------------------------------------------------------

    def make(self, view: str, data: Optional[Mapping[str, Any]] = None,
             merge_data: Optional[Mapping[str, Any]] = None) -> View:
        """
        Get the evaluated view contents for the given view

        Raises:
            ViewNotFoundException: If the view cannot be located
            EngineNotFoundException: If no engine handles the view's extension
        """
        name = ViewName.normalize(view)
        path = self.finder.find(name)

        logger.debug("Making view [%s] from %s", name, path)
        return self.view_instance(name, path, self.parse_data(data, merge_data))

    def file(self, path: Union[str, Path], data: Optional[Mapping[str, Any]] = None,
             merge_data: Optional[Mapping[str, Any]] = None) -> View:
        """Get the evaluated view contents for the given path, bypassing the finder"""
        path = str(path)
        return self.view_instance(path, path, self.parse_data(data, merge_data))

    def first(self, views: Iterable[str], data: Optional[Mapping[str, Any]] = None,
              merge_data: Optional[Mapping[str, Any]] = None) -> View:
        """
        Get the first view that actually exists from the given list

        Raises:
            ViewNotFoundException: If none of the views exist
        """
        for view in views:
            if self.exists(view):
                return self.make(view, data, merge_data)

        raise ViewNotFoundException("None of the views in the given array exist.")

    def render_each(self, view: str, items: Any, iterator: str, empty: Optional[str] = None) -> str:
        """
        Render the view once for each item; 'key' holds the item's key or index

        With no items, renders the `empty` view (or returns the text after
        a 'raw|' prefix).
        """
        if items:
            return ''.join(
                self.make(view, {'key': key, iterator: value}).render()
                for key, value in pairs(items)
            )

        if not empty:
            return ''

        if empty.startswith('raw|'):
            return empty[4:]

        return self.make(empty).render()

    def exists(self, view: str) -> bool:
        """Determine if a given view exists"""
        try:
            self.finder.find(ViewName.normalize(view))
        except ViewNotFoundException:
            return False

        return True

    def parse_data(self, data: Optional[Mapping[str, Any]],
                   merge_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Merge explicit data; merge_data wins on key collisions"""
        merged = dict(data or {})
        merged.update(merge_data or {})
        return merged

    def view_instance(self, view: str, path: str, data: Dict[str, Any]) -> View:
        """Create a new view instance and fire its creators"""
        instance = View(self, self.get_engine_from_path(path), view, path, data, self.shared_data)
        self.call_creator(instance)
        return instance

    def get_engine_from_path(self, path: str) -> Engine:
        """
        Get the appropriate view engine for the given path

        Raises:
            EngineNotFoundException: If the extension is not registered
        """
        extension = self.get_extension(path)

        if extension is None:
            raise EngineNotFoundException(f"Unrecognized extension in file: {path}.")

        return self.engines.resolve(self.extensions[extension])

    def get_extension(self, path: str) -> Optional[str]:
        """Get the registered extension used by the view file"""
        for extension in self.extensions:
            if Str.ends_with(path, '.' + extension):
                return extension

        return None

    # ------------------------------------------------------------------
    # Shared data
    # ------------------------------------------------------------------

    def share(self, key: Union[str, Mapping[str, Any]], value: Any = None) -> Any:
        """
        Add a piece of shared data to the environment

        Only views made afterwards see the new value.
        """
        if isinstance(key, Mapping):
            self.shared_data.update(key)
            return key

        self.shared_data[key] = value
        return value

    def shared(self, key: str, default: Any = None) -> Any:
        """Get an item from the shared data"""
        return self.get_shared().get(key, default)

    def get_shared(self) -> Dict[str, Any]:
        return self.shared_data

    # ------------------------------------------------------------------
    # Composers and creators
    # ------------------------------------------------------------------

    def composer(self, views: Patterns, callback: Any) -> List[str]:
        """
        Register a view composer

        Returns:
            Names of the currently known views matching the patterns
        """
        return self._add_view_event('composing', views, self._listener(callback, 'compose'))

    def creator(self, views: Patterns, callback: Any) -> List[str]:
        """
        Register a view creator

        Returns:
            Names of the currently known views matching the patterns
        """
        return self._add_view_event('creating', views, self._listener(callback, 'create'))

    def call_composer(self, view: View) -> None:
        self.events.dispatch(f"composing: {view.get_name()}", view)

    def call_creator(self, view: View) -> None:
        self.events.dispatch(f"creating: {view.get_name()}", view)

    def _add_view_event(self, prefix: str, views: Patterns, listener: Callable[[View], Any]) -> List[str]:
        patterns = [views] if isinstance(views, str) else list(views)
        patterns = [self._normalize_pattern(pattern) for pattern in patterns]

        for pattern in patterns:
            self.events.listen(f"{prefix}: {pattern}", listener)

        return [name for name in self.finder.known_views() if Str.is_(patterns, name)]

    def _normalize_pattern(self, pattern: str) -> str:
        # Views made by file() are named by their path, which stays untouched
        if self.get_extension(pattern) is not None:
            return pattern
        return ViewName.normalize(pattern)

    def _listener(self, callback: Any, method: str) -> Callable[[View], Any]:
        if callable(callback):
            return callback

        handler = getattr(callback, method, None)
        if handler is None or not callable(handler):
            raise TypeError(
                f"View hook must be callable or define a {method}(view) method, "
                f"got {type(callback).__name__}"
            )
        return handler

    # ------------------------------------------------------------------
    # Finder delegation
    # ------------------------------------------------------------------

    def add_location(self, location: Union[str, Path]) -> 'Factory':
        """Add a location to the array of view locations"""
        self.finder.add_location(location)
        return self

    def prepend_location(self, location: Union[str, Path]) -> 'Factory':
        self.finder.prepend_location(location)
        return self

    def add_namespace(self, namespace: str, hints: Hints) -> 'Factory':
        """Add a new namespace to the loader (hints are appended)"""
        self.finder.add_namespace(namespace, hints)
        return self

    def prepend_namespace(self, namespace: str, hints: Hints) -> 'Factory':
        self.finder.prepend_namespace(namespace, hints)
        return self

    def replace_namespace(self, namespace: str, hints: Hints) -> 'Factory':
        """Replace the namespace hints for the given namespace"""
        self.finder.replace_namespace(namespace, hints)
        return self

    def add_extension(self, extension: str, engine: str,
                      resolver: Optional[Callable[[], Engine]] = None) -> 'Factory':
        """
        Register a valid view extension and its engine

        Example:
            factory.add_extension('css', 'file', lambda: FileEngine(files))
        """
        self.finder.add_extension(extension)

        if resolver is not None:
            self.engines.register(engine, resolver)

        self.extensions.pop(extension, None)
        self.extensions = {extension: engine, **self.extensions}
        return self

    def get_extensions(self) -> Dict[str, str]:
        return self.extensions

    def get_engine_resolver(self) -> EngineResolver:
        return self.engines

    def get_finder(self) -> FileViewFinder:
        return self.finder

    def get_dispatcher(self) -> Dispatcher:
        return self.events
