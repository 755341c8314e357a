"""
Service Container
Registry of named lazy bindings used to assemble the view pipeline
"""
import inspect
from typing import Any, Callable, Dict

from bladeview.exceptions import BindingNotFoundException, ContainerException
from bladeview.logging import getLogger

logger = getLogger(__name__)

Factory = Callable[['Container'], Any]


class Container:
    """
    Laravel-style service container

    Every binding is a dict entry {'type', 'factory', 'instance', 'resolved'}.
    Singleton bindings invoke their factory at most once and cache the
    result; factory bindings are invoked on every make().

    Not safe for concurrent first resolution: a host resolving from several
    threads must synchronise before the first make() of each key.

    Example:
        container = Container()
        container.bind_if('files', lambda c: Filesystem())
        files = container.get('files')
        assert files is container.get('files')
    """

    def __init__(self):
        self.bindings: Dict[str, Dict[str, Any]] = {}

    def bind_if(self, key: str, factory: Factory) -> bool:
        """
        Register a singleton binding only if the key is not bound yet

        Lets a host pre-register a replacement before the default wiring
        runs.

        Returns:
            True if the binding was registered, False if the key was already bound
        """
        if key in self.bindings:
            logger.debug("Binding '%s' already registered, keeping existing", key)
            return False

        self.bindings[key] = {'type': 'singleton', 'factory': factory, 'instance': None, 'resolved': False}
        return True

    def singleton(self, key: str, factory_or_instance: Any) -> None:
        """
        Register a singleton binding
        If factory: Will be called once and cached
        If instance: Will be stored directly
        """
        self._guard_resolved(key)

        if inspect.isfunction(factory_or_instance) or inspect.ismethod(factory_or_instance):
            self.bindings[key] = {'type': 'singleton', 'factory': factory_or_instance, 'instance': None, 'resolved': False}
        else:
            self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': factory_or_instance, 'resolved': True}

    def instance(self, key: str, instance: Any) -> Any:
        """Register an existing object as a resolved singleton"""
        self._guard_resolved(key)
        self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': instance, 'resolved': True}
        return instance

    def bind(self, key: str, factory: Factory) -> None:
        """Register a factory binding (called every time)"""
        self._guard_resolved(key)
        self.bindings[key] = {'type': 'factory', 'factory': factory, 'instance': None, 'resolved': False}

    def make(self, key: str) -> Any:
        """
        Resolve a binding from the container

        Raises:
            BindingNotFoundException: If the key was never bound
        """
        if key not in self.bindings:
            raise BindingNotFoundException(f"Binding '{key}' not found in container", key=key)

        binding = self.bindings[key]

        if binding['type'] == 'factory':
            return binding['factory'](self)

        if not binding['resolved']:
            # A failing factory leaves the binding unresolved for later calls
            binding['instance'] = binding['factory'](self)
            binding['resolved'] = True
            logger.debug("Resolved binding '%s'", key)

        return binding['instance']

    def get(self, key: str) -> Any:
        """Alias of make()"""
        return self.make(key)

    def has(self, key: str) -> bool:
        """
        Check if a binding exists in the container
        """
        return key in self.bindings

    bound = has

    def resolved(self, key: str) -> bool:
        """Check if a singleton binding has already been built"""
        binding = self.bindings.get(key)
        return bool(binding and binding['resolved'])

    def _guard_resolved(self, key: str) -> None:
        if self.resolved(key):
            raise ContainerException(
                f"Binding '{key}' has already been resolved and cannot be replaced"
            )

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def get_bindings(self) -> Dict[str, Dict[str, Any]]:
        """
        Get all container bindings
        """
        result = {}
        for key, binding in self.bindings.items():
            result[key] = {
                'type': binding['type'],
                'instantiated': binding['resolved'] if binding['type'] == 'singleton' else None
            }
        return result

    def list_bindings(self) -> str:
        """
        Get a formatted list of all container bindings
        """
        bindings = self.get_bindings()

        if not bindings:
            return "No bindings registered in container."

        singletons = []
        factories = []

        for key, info in bindings.items():
            if info['type'] == 'singleton':
                status = 'instantiated' if info['instantiated'] else 'lazy'
                singletons.append(f"  {key:<30} [{status}]")
            else:
                factories.append(f"  {key:<30} [new instance each call]")

        output = []

        if singletons:
            output.append("Singletons:")
            output.extend(sorted(singletons))

        if factories:
            if output:
                output.append("")
            output.append("Factories (bind):")
            output.extend(sorted(factories))

        return "\n".join(output)
