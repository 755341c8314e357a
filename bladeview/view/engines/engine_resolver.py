"""
Engine Resolver
Maps engine names to lazily constructed engines
"""
from typing import Callable, Dict

from bladeview.exceptions import EngineNotFoundException
from bladeview.logging import getLogger
from bladeview.view.engines.engine import Engine

logger = getLogger(__name__)


class EngineResolver:
    """
    Registry of engine factories

    Each engine is built on its first resolve() and memoized. Registering a
    name again replaces the factory and forgets the memoized engine.

    Example:
        resolver = EngineResolver()
        resolver.register('template', lambda: CompilerEngine(compiler))
        engine = resolver.resolve('template')
    """

    def __init__(self):
        self.resolvers: Dict[str, Callable[[], Engine]] = {}
        self.resolved: Dict[str, Engine] = {}

    def register(self, engine: str, resolver: Callable[[], Engine]) -> None:
        """Register a new engine resolver"""
        self.forget(engine)
        self.resolvers[engine] = resolver

    def resolve(self, engine: str) -> Engine:
        """
        Resolve an engine instance by name

        Raises:
            EngineNotFoundException: If no resolver is registered under the name
        """
        if engine in self.resolved:
            return self.resolved[engine]

        if engine not in self.resolvers:
            raise EngineNotFoundException(f"Engine [{engine}] not found.")

        self.resolved[engine] = self.resolvers[engine]()
        logger.debug("Resolved engine '%s'", engine)
        return self.resolved[engine]

    def forget(self, engine: str) -> None:
        """Remove a resolved engine"""
        self.resolved.pop(engine, None)

    def has(self, engine: str) -> bool:
        return engine in self.resolvers
