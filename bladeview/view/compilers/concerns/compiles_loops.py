"""
Loop statements: @foreach, @for, @while, @break, @continue
"""
import re

from bladeview.exceptions import CompileException
from bladeview.view.runtime import LOOP, PAIRS
from bladeview.view.compilers.code_builder import CodeBuilder

_AS_FORM = re.compile(r'^(?P<iterable>.+)\s+as\s+(?P<target>[^\n]+?)$', re.S)
_IN_FORM = re.compile(r'^(?P<target>[\w\s,]+?)\s+in\s+(?P<iterable>.+)$', re.S)
_IDENTIFIER = re.compile(r'^[A-Za-z_]\w*$')
_LOOP_KINDS = ('for', 'while')


class CompilesLoops:

    def compile_foreach(self, builder: CodeBuilder, expression: str, line: int) -> None:
        """
        Compile @foreach(items as item), @foreach(mapping as key => value)
        or the Python form @foreach(item in items). The body sees `loop`.
        """
        match = _AS_FORM.match(expression.strip())
        if match:
            iterable = match.group('iterable').strip()
            target = match.group('target').strip()
            if '=>' in target:
                key, value = (part.strip() for part in target.split('=>', 1))
                names = self._loop_targets(f"{key}, {value}", line)
                source = f"{PAIRS}({iterable})"
            else:
                names = self._loop_targets(target, line)
                source = f"({iterable})"
        else:
            match = _IN_FORM.match(expression.strip())
            if not match:
                raise CompileException(
                    "Malformed @foreach expression; expected 'items as item'",
                    directive='foreach', line=line
                )
            names = self._loop_targets(match.group('target'), line)
            source = f"({match.group('iterable').strip()})"

        builder.open(f"for {names} in {LOOP}({source}):", 'foreach', line)

    def compile_endforeach(self, builder: CodeBuilder, expression: str, line: int) -> None:
        builder.close('endforeach', line, kinds=('for',))

    def compile_for(self, builder: CodeBuilder, expression: str, line: int) -> None:
        if not _IN_FORM.match(expression.strip()):
            raise CompileException(
                "Malformed @for expression; expected 'name in iterable'",
                directive='for', line=line
            )
        builder.open(f"for {expression.strip()}:", 'for', line)

    def compile_endfor(self, builder: CodeBuilder, expression: str, line: int) -> None:
        builder.close('endfor', line, kinds=('for',))

    def compile_while(self, builder: CodeBuilder, expression: str, line: int) -> None:
        if not expression:
            raise CompileException("@while requires an expression", directive='while', line=line)
        builder.open(f"while ({expression}):", 'while', line)

    def compile_endwhile(self, builder: CodeBuilder, expression: str, line: int) -> None:
        builder.close('endwhile', line, kinds=('while',))

    def compile_break(self, builder: CodeBuilder, expression: str, line: int) -> None:
        self._compile_loop_jump(builder, 'break', expression, line)

    def compile_continue(self, builder: CodeBuilder, expression: str, line: int) -> None:
        self._compile_loop_jump(builder, 'continue', expression, line)

    def _compile_loop_jump(self, builder: CodeBuilder, keyword: str, expression: str, line: int) -> None:
        if not builder.in_block(_LOOP_KINDS):
            raise CompileException(f"@{keyword} outside of a loop", directive=keyword, line=line)

        if not expression:
            builder.emit(keyword, keyword, line)
            return

        builder.open(f"if ({expression}):", keyword, line)
        builder.emit(keyword, keyword, line)
        builder.close(keyword, line)

    def _loop_targets(self, target: str, line: int) -> str:
        names = [name.strip() for name in target.split(',')]
        if not all(_IDENTIFIER.match(name) for name in names):
            raise CompileException(
                f"Invalid loop variable '{target.strip()}'", directive='foreach', line=line
            )
        return ', '.join(names)
