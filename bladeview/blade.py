"""
Blade
Composition root wiring the view pipeline into a container
"""
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Union

from bladeview.container import Container
from bladeview.defaults import (
    DEFAULT_CACHE_PATH,
    DEFAULT_VIEW_EXTENSIONS,
    DEFAULT_VIEW_PATH,
    ENV_CACHE_PATH,
    ENV_VIEW_PATHS,
)
from bladeview.events import Dispatcher
from bladeview.logging import getLogger
from bladeview.providers import ViewServiceProvider
from bladeview.support.config import Repository
from bladeview.support.env_helper import EnvHelper
from bladeview.support.filesystem import Filesystem
from bladeview.view.compilers import BladeCompiler
from bladeview.view.engines.engine import Engine
from bladeview.view.factory import Factory
from bladeview.view.finder import Hints
from bladeview.view.view import View

logger = getLogger(__name__)

PathLike = Union[str, Path]


class Blade:
    """
    Standalone Blade view renderer

    Each instance owns its container, so two instances never share state.
    Services are registered with bind_if; pre-binding a key on a container
    passed in replaces that stage while the rest of the wiring stays.

    Example:
        blade = Blade('resources/views', 'storage/framework/views')
        blade.share('app_name', 'Acme')
        html = blade.render('pages.home', {'title': 'Home'})

        # Replace a stage
        container = Container()
        container.instance('files', FakeFilesystem())
        blade = Blade(['views'], 'cache', container)
    """

    def __init__(
        self,
        view_paths: Union[PathLike, Sequence[PathLike]],
        cache_path: PathLike,
        container: Optional[Container] = None
    ):
        if isinstance(view_paths, (str, Path)):
            view_paths = [view_paths]

        self.view_paths: List[str] = [str(path) for path in view_paths]
        self.cache_path = str(cache_path)
        self.container = container if container is not None else Container()

        self.setup_container()
        ViewServiceProvider(self.container).register()

    def setup_container(self) -> None:
        """Bind the base services the view pipeline depends on"""
        self.container.bind_if('files', lambda c: Filesystem())
        self.container.bind_if('events', lambda c: Dispatcher())
        self.container.bind_if('config', lambda c: Repository({
            'view.paths': self.view_paths,
            'view.compiled': self.cache_path,
            'view.extensions': list(DEFAULT_VIEW_EXTENSIONS),
        }))

    @classmethod
    def from_env(cls, env_path: Optional[PathLike] = None, container: Optional[Container] = None) -> 'Blade':
        """
        Build an instance from BLADE_VIEW_PATHS and BLADE_CACHE_PATH

        BLADE_VIEW_PATHS is os.pathsep separated. A .env file is loaded
        first when present.
        """
        EnvHelper.load(env_path)

        view_paths = EnvHelper.get_list(ENV_VIEW_PATHS, [DEFAULT_VIEW_PATH])
        cache_path = EnvHelper.get(ENV_CACHE_PATH, DEFAULT_CACHE_PATH)

        logger.debug("Configured from environment: views=%s cache=%s", view_paths, cache_path)
        return cls(view_paths, cache_path, container)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, view: str, data: Optional[Mapping[str, Any]] = None,
               merge_data: Optional[Mapping[str, Any]] = None) -> str:
        return self.make(view, data, merge_data).render()

    def make(self, view: str, data: Optional[Mapping[str, Any]] = None,
             merge_data: Optional[Mapping[str, Any]] = None) -> View:
        return self.get_factory().make(view, data, merge_data)

    def file(self, path: PathLike, data: Optional[Mapping[str, Any]] = None,
             merge_data: Optional[Mapping[str, Any]] = None) -> View:
        return self.get_factory().file(path, data, merge_data)

    def first(self, views: Iterable[str], data: Optional[Mapping[str, Any]] = None,
              merge_data: Optional[Mapping[str, Any]] = None) -> View:
        return self.get_factory().first(views, data, merge_data)

    def render_each(self, view: str, items: Any, iterator: str, empty: Optional[str] = None) -> str:
        return self.get_factory().render_each(view, items, iterator, empty)

    def exists(self, view: str) -> bool:
        return self.get_factory().exists(view)

    # ------------------------------------------------------------------
    # Data and hooks
    # ------------------------------------------------------------------

    def share(self, key: Union[str, Mapping[str, Any]], value: Any = None) -> Any:
        return self.get_factory().share(key, value)

    def composer(self, views: Union[str, Iterable[str]], callback: Any) -> List[str]:
        return self.get_factory().composer(views, callback)

    def creator(self, views: Union[str, Iterable[str]], callback: Any) -> List[str]:
        return self.get_factory().creator(views, callback)

    # ------------------------------------------------------------------
    # Compiler
    # ------------------------------------------------------------------

    def compiler(self) -> BladeCompiler:
        return self.container.make('blade.compiler')

    def directive(self, name: str, handler: Callable[[str], Optional[str]]) -> None:
        self.compiler().directive(name, handler)

    def if_(self, name: str, predicate: Callable[..., bool]) -> None:
        self.compiler().if_(name, predicate)

    # ------------------------------------------------------------------
    # Locations
    # ------------------------------------------------------------------

    def add_namespace(self, namespace: str, hints: Hints) -> 'Blade':
        self.get_factory().add_namespace(namespace, hints)
        return self

    def replace_namespace(self, namespace: str, hints: Hints) -> 'Blade':
        self.get_factory().replace_namespace(namespace, hints)
        return self

    def add_extension(self, extension: str, engine: str,
                      resolver: Optional[Callable[[], Engine]] = None) -> 'Blade':
        self.get_factory().add_extension(extension, engine, resolver)
        return self

    def get_container(self) -> Container:
        return self.container

    def get_factory(self) -> Factory:
        return self.container.make('view')
