"""
bladeview - standalone Blade view rendering

Example:
    from bladeview import Blade

    blade = Blade('resources/views', 'storage/framework/views')
    print(blade.render('welcome', {'name': 'World'}))
"""
from bladeview.blade import Blade
from bladeview.container import Container
from bladeview.exceptions import (
    BladeException,
    ContainerException,
    BindingNotFoundException,
    ConfigKeyNotFoundException,
    ViewNotFoundException,
    EngineNotFoundException,
    CompileException,
    ViewException,
)
from bladeview.view import Factory, FileViewFinder, View

__version__ = '0.1.0'

__all__ = [
    'Blade',
    'Container',
    'Factory',
    'FileViewFinder',
    'View',
    'BladeException',
    'ContainerException',
    'BindingNotFoundException',
    'ConfigKeyNotFoundException',
    'ViewNotFoundException',
    'EngineNotFoundException',
    'CompileException',
    'ViewException',
]
