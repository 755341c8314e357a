"""
Built-in Commands
"""
from bladeview.console.commands.container_command import ContainerCommand
from bladeview.console.commands.view_cache_command import ViewCacheCommand
from bladeview.console.commands.view_clear_command import ViewClearCommand

__all__ = [
    'ContainerCommand',
    'ViewCacheCommand',
    'ViewClearCommand',
]
