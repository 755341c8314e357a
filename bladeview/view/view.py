"""
View
A resolved template plus the data it will be rendered with
"""
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

from bladeview.view.engines.engine import Engine
from bladeview.view.runtime import ENV

if TYPE_CHECKING:
    from bladeview.view.factory import Factory


class View:
    """
    Renderable view

    A View is created by Factory.make() / Factory.file() and lives for a
    single render. Its data already holds the merged explicit data; the
    factory's shared data is snapshotted at creation and sits underneath.

    Example:
        view = factory.make('pages.home', {'title': 'Home'})
        view.with_('user', user)
        html = view.render()
    """

    def __init__(
        self,
        factory: 'Factory',
        engine: Engine,
        name: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        shared: Optional[Dict[str, Any]] = None
    ):
        self.factory = factory
        self.engine = engine
        self.name = name
        self.path = path
        self.data: Dict[str, Any] = dict(data or {})
        self.shared: Dict[str, Any] = dict(shared or {})

    def render(self) -> str:
        """
        Get the string contents of the view

        Composers run first and may mutate the view data.
        """
        self.factory.call_composer(self)

        return self.engine.get(self.path, self.gather_data())

    def gather_data(self) -> Dict[str, Any]:
        """
        Shared data overlaid with the view's own data

        The factory rides along under '__env' so @include can make views.
        """
        data = dict(self.shared)
        data.update(self.data)
        data[ENV] = self.factory
        return data

    def with_(self, key: Union[str, Mapping[str, Any]], value: Any = None) -> 'View':
        """Add a piece of data (or a mapping of data) to the view"""
        if isinstance(key, Mapping):
            self.data.update(key)
        else:
            self.data[key] = value

        return self

    def get_name(self) -> str:
        return self.name

    def get_data(self) -> Dict[str, Any]:
        return self.data

    def get_path(self) -> str:
        return self.path

    def set_path(self, path: str) -> None:
        self.path = path

    def get_engine(self) -> Engine:
        return self.engine

    def get_factory(self) -> 'Factory':
        return self.factory

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value

    def __delitem__(self, key: str) -> None:
        del self.data[key]

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<View {self.name} ({self.path})>"
