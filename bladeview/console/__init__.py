"""
Console Package
"""
from bladeview.console.command import Command
from bladeview.console.kernel import Kernel, main

__all__ = [
    'Command',
    'Kernel',
    'main',
]
