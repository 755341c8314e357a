"""
View Engines
"""
from bladeview.view.engines.engine import Engine
from bladeview.view.engines.compiler_engine import CompilerEngine
from bladeview.view.engines.engine_resolver import EngineResolver
from bladeview.view.engines.file_engine import FileEngine

__all__ = [
    'Engine',
    'CompilerEngine',
    'EngineResolver',
    'FileEngine',
]
