"""
Conditional statements: @if, @elseif, @else, @endif, @unless, @isset, @empty
"""
from bladeview.exceptions import CompileException
from bladeview.view.runtime import EMPTY, ISSET
from bladeview.view.compilers.code_builder import CodeBuilder

_IF_KINDS = ('if',)


def _require(expression: str, directive: str, line: int) -> str:
    if not expression:
        raise CompileException(
            f"@{directive} requires an expression", directive=directive, line=line
        )
    return expression


class CompilesConditionals:

    def compile_if(self, builder: CodeBuilder, expression: str, line: int) -> None:
        condition = _require(expression, 'if', line)
        builder.open(f"if ({condition}):", 'if', line)

    def compile_elseif(self, builder: CodeBuilder, expression: str, line: int) -> None:
        condition = _require(expression, 'elseif', line)
        builder.middle(f"elif ({condition}):", 'elseif', line, kinds=_IF_KINDS)

    def compile_else(self, builder: CodeBuilder, expression: str, line: int) -> None:
        builder.middle("else:", 'else', line, kinds=_IF_KINDS)

    def compile_endif(self, builder: CodeBuilder, expression: str, line: int) -> None:
        builder.close('endif', line, kinds=_IF_KINDS)

    def compile_unless(self, builder: CodeBuilder, expression: str, line: int) -> None:
        condition = _require(expression, 'unless', line)
        builder.open(f"if not ({condition}):", 'unless', line)

    def compile_endunless(self, builder: CodeBuilder, expression: str, line: int) -> None:
        builder.close('endunless', line, kinds=_IF_KINDS)

    def compile_isset(self, builder: CodeBuilder, expression: str, line: int) -> None:
        value = _require(expression, 'isset', line)
        builder.open(f"if {ISSET}(lambda: ({value})):", 'isset', line)

    def compile_endisset(self, builder: CodeBuilder, expression: str, line: int) -> None:
        builder.close('endisset', line, kinds=_IF_KINDS)

    def compile_empty(self, builder: CodeBuilder, expression: str, line: int) -> None:
        value = _require(expression, 'empty', line)
        builder.open(f"if {EMPTY}(lambda: ({value})):", 'empty', line)

    def compile_endempty(self, builder: CodeBuilder, expression: str, line: int) -> None:
        builder.close('endempty', line, kinds=_IF_KINDS)
