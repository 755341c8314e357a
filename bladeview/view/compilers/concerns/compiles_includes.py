"""
Output statements: @include, @json
"""
from bladeview.exceptions import CompileException
from bladeview.view.runtime import ECHO, INCLUDE, JSON
from bladeview.view.compilers.code_builder import CodeBuilder


class CompilesIncludes:

    def compile_include(self, builder: CodeBuilder, expression: str, line: int) -> None:
        """@include('view.name') or @include('view.name', {'extra': value})"""
        if not expression:
            raise CompileException("@include requires a view name", directive='include', line=line)
        builder.emit(f"{ECHO}({INCLUDE}({expression}))", 'include', line)

    def compile_json(self, builder: CodeBuilder, expression: str, line: int) -> None:
        if not expression:
            raise CompileException("@json requires an expression", directive='json', line=line)
        builder.emit(f"{ECHO}({JSON}({expression}))", 'json', line)
