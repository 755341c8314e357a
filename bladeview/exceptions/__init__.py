"""
Exceptions Package
Error taxonomy for the container and the view pipeline
"""
from bladeview.exceptions.custom import (
    BladeException,
    ContainerException,
    BindingNotFoundException,
    ConfigKeyNotFoundException,
    ViewNotFoundException,
    EngineNotFoundException,
    CompileException,
    ViewException,
)

__all__ = [
    'BladeException',
    'ContainerException',
    'BindingNotFoundException',
    'ConfigKeyNotFoundException',
    'ViewNotFoundException',
    'EngineNotFoundException',
    'CompileException',
    'ViewException',
]
