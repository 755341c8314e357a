"""
View Compilers
"""
from bladeview.view.compilers.compiler import Compiler
from bladeview.view.compilers.blade_compiler import BladeCompiler

__all__ = [
    'Compiler',
    'BladeCompiler',
]
