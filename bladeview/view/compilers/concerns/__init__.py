from bladeview.view.compilers.concerns.compiles_conditionals import CompilesConditionals
from bladeview.view.compilers.concerns.compiles_includes import CompilesIncludes
from bladeview.view.compilers.concerns.compiles_loops import CompilesLoops

__all__ = [
    'CompilesConditionals',
    'CompilesIncludes',
    'CompilesLoops',
]
