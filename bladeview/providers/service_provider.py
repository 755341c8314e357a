"""
Service Provider Base Class
Laravel-style service providers for registering bindings into a container
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bladeview.container import Container


class ServiceProvider(ABC):
    """
    Base Service Provider class

    Providers register bindings in register() and may wire listeners or
    extensions in boot(), once every provider has registered.
    """

    def __init__(self, container: 'Container'):
        self.container = container

    def register(self):
        """
        Register services in the container

        Example:
            self.container.bind_if('files', lambda c: Filesystem())
        """
        pass

    def boot(self):
        """Bootstrap services (after all providers are registered)"""
        pass
