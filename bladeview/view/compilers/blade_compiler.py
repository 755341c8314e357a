"""
Blade Compiler
Compiles Blade-style templates into Python modules stored in the view cache
"""
import os
import re
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

from bladeview.defaults import DEFAULT_SOURCE_ENCODING
from bladeview.exceptions import BladeException, CompileException
from bladeview.logging import getLogger
from bladeview.view.compilers.code_builder import END_MARKER, CodeBuilder
from bladeview.view.compilers.compiler import Compiler
from bladeview.view.compilers.concerns import (
    CompilesConditionals,
    CompilesIncludes,
    CompilesLoops,
)
from bladeview.view.runtime import COMPILER, ECHO, ESCAPE, RAW

logger = getLogger(__name__)

DirectiveHandler = Callable[[str], Optional[str]]
Predicate = Callable[..., bool]

_DIRECTIVE_NAME = re.compile(r'^\w+$')

_TOKENS = re.compile(
    r"""
      (?P<comment>\{\{--.*?--\}\})
    | (?P<literal_echo>@\{\{.*?\}\})
    | (?P<raw>\{!!(?P<raw_expr>.*?)!!\})
    | (?P<echo>\{\{(?P<echo_expr>.*?)\}\})
    | (?<![\w@])@(?P<name>@?\w+)
    """,
    re.S | re.X,
)


class BladeCompiler(CompilesConditionals, CompilesLoops, CompilesIncludes, Compiler):
    """
    Blade template compiler

    Syntax:
        {{ expr }}              HTML-escaped echo of a Python expression
        {!! expr !!}            Raw echo
        {{-- comment --}}       Dropped from the output
        @{{ text }}, @@name     Literal text
        @if(cond) ... @elseif(cond) ... @else ... @endif
        @unless / @isset / @empty ... matching @end... directive
        @foreach(items as item) ... @endforeach  (`loop` is available)
        @for(i in range(3)) / @while(cond), @break, @continue
        @include('view.name', {...}), @json(value)

    Custom directives registered with directive() return Python source
    that is inserted where the directive appears. Lines ending with ':'
    open a block, a '#end' line closes it, and output is written with
    __echo(text) (use __e(value) to escape). Unknown @words are left as
    text.

    Example:
        compiler.directive('upper', lambda expr: f"__echo(__e(str({expr}).upper()))")
        compiler.if_('admin', lambda: user.is_admin)
        # @admin ... @elseadmin ... @endadmin
    """

    BUILTIN_DIRECTIVES = frozenset([
        'if', 'elseif', 'else', 'endif',
        'unless', 'endunless',
        'isset', 'endisset',
        'empty', 'endempty',
        'foreach', 'endforeach',
        'for', 'endfor',
        'while', 'endwhile',
        'break', 'continue',
        'include', 'json',
    ])

    def __init__(self, files, cache_path: Union[str, Path], encoding: str = DEFAULT_SOURCE_ENCODING, **kwargs):
        super().__init__(files, cache_path, **kwargs)
        self.encoding = encoding
        self.custom_directives: Dict[str, DirectiveHandler] = {}
        self.conditions: Dict[str, Predicate] = {}
        self.condition_openers: Dict[str, Tuple[str, str]] = {}

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------

    def compile(self, path: Union[str, Path]) -> str:
        """
        Compile the view at the given path unless its artifact is fresh

        Returns:
            Path of the compiled artifact

        Raises:
            OSError: If the source cannot be read or the cache cannot be written
            CompileException: If directive expansion fails
        """
        compiled = self.get_compiled_path(path)

        if not self.is_expired(path):
            logger.debug("Compiled view for %s is fresh", path)
            return compiled

        contents = self.files.get(path, encoding=self.encoding)
        source = self.compile_string(contents, path=str(path))

        self.ensure_compiled_directory_exists()
        self.files.put(compiled, self._header(path) + source)

        logger.debug("Compiled %s to %s", path, compiled)
        return compiled

    def _header(self, path: Union[str, Path]) -> str:
        return (
            "# Compiled by bladeview. Do not edit.\n"
            f"# Source: {os.path.abspath(str(path))}\n"
        )

    # ------------------------------------------------------------------
    # Compilation
    # ------------------------------------------------------------------

    def compile_string(self, value: str, path: Optional[str] = None) -> str:
        """
        Compile Blade source into Python module source

        Raises:
            CompileException: If a directive is malformed or blocks are unbalanced
        """
        builder = CodeBuilder()
        try:
            self._compile_tokens(builder, value)
            source = builder.finish()
        except CompileException as e:
            if e.path is None:
                e.path = path
            raise

        self._validate(source, builder, path)
        return source

    def _compile_tokens(self, builder: CodeBuilder, value: str) -> None:
        position = 0
        text = []

        def flush():
            if text:
                builder.emit(f"{ECHO}({''.join(text)!r})")
                text.clear()

        while True:
            match = _TOKENS.search(value, position)
            if match is None:
                text.append(value[position:])
                break

            text.append(value[position:match.start()])
            line = value.count('\n', 0, match.start()) + 1
            position = match.end()

            if match.group('comment') is not None:
                continue

            if match.group('literal_echo') is not None:
                text.append(match.group('literal_echo')[1:])
                continue

            if match.group('raw') is not None:
                expression = self._echo_expression(match.group('raw_expr'), '{!!', line)
                flush()
                builder.emit(f"{ECHO}({RAW}({expression}))", None, line)
                continue

            if match.group('echo') is not None:
                expression = self._echo_expression(match.group('echo_expr'), '{{', line)
                flush()
                builder.emit(f"{ECHO}({ESCAPE}({expression}))", None, line)
                continue

            name = match.group('name')
            if name.startswith('@'):
                text.append(name)
                continue

            if name not in self.custom_directives and name not in self.BUILTIN_DIRECTIVES:
                text.append(match.group(0))
                continue

            expression, position = self._statement_expression(value, position, name, line)
            flush()
            self._compile_statement(builder, name, expression, line)

        flush()

    def _echo_expression(self, expression: str, delimiter: str, line: int) -> str:
        expression = expression.strip()
        if not expression:
            raise CompileException(f"Empty {delimiter} echo", line=line)
        return f"({expression})"

    def _statement_expression(self, value: str, position: int, name: str, line: int) -> Tuple[str, int]:
        """Read an optional '( ... )' argument list after a directive name"""
        cursor = position
        while cursor < len(value) and value[cursor] in ' \t':
            cursor += 1

        if cursor >= len(value) or value[cursor] != '(':
            return '', position

        end = self._matching_parenthesis(value, cursor, name, line)
        return value[cursor + 1:end].strip(), end + 1

    def _matching_parenthesis(self, value: str, start: int, name: str, line: int) -> int:
        depth = 0
        quote = None
        index = start

        while index < len(value):
            char = value[index]
            if quote:
                if char == '\\':
                    index += 1
                elif char == quote:
                    quote = None
            elif char in ('"', "'"):
                quote = char
            elif char == '(':
                depth += 1
            elif char == ')':
                depth -= 1
                if depth == 0:
                    return index
            index += 1

        raise CompileException(
            f"Unterminated parentheses after @{name}", directive=name, line=line
        )

    def _compile_statement(self, builder: CodeBuilder, name: str, expression: str, line: int) -> None:
        if name in self.custom_directives:
            self._call_custom_directive(builder, name, expression, line)
            return

        getattr(self, f"compile_{name}")(builder, expression, line)

    def _call_custom_directive(self, builder: CodeBuilder, name: str, expression: str, line: int) -> None:
        try:
            code = self.custom_directives[name](expression)
        except BladeException:
            raise
        except Exception as e:
            raise CompileException(
                f"Directive handler failed: {e}", directive=name, line=line
            ) from e

        if code:
            builder.add(str(code), name, line, openers=self.condition_openers.get(name))

    def _validate(self, source: str, builder: CodeBuilder, path: Optional[str]) -> None:
        """Reject generated code that is not valid Python"""
        try:
            compile(source, path or '<blade>', 'exec')
        except SyntaxError as e:
            directive, line = builder.origin(e.lineno or 0)
            raise CompileException(
                f"Invalid expression: {e.msg}", directive=directive, line=line, path=path
            ) from e

    # ------------------------------------------------------------------
    # Extensions
    # ------------------------------------------------------------------

    def directive(self, name: str, handler: DirectiveHandler) -> None:
        """
        Register a handler for custom directives

        Registering the same name again replaces the previous handler.

        Raises:
            ValueError: If the name contains anything but word characters
        """
        if not _DIRECTIVE_NAME.match(name):
            raise ValueError(
                f"The directive name [{name}] is not valid. "
                "Directive names must only contain alphanumeric characters and underscores."
            )

        self.custom_directives[name] = handler
        self.condition_openers.pop(name, None)

    def if_(self, name: str, predicate: Predicate) -> None:
        """
        Register an "if" statement directive

        Makes @name(args), @elsename(args), @unlessname(args) and @endname
        available. The compiled view calls check(name, args) so the
        predicate runs at render time.
        """
        self.conditions[name] = predicate

        def call(expression: str) -> str:
            if expression:
                return f"{COMPILER}.check({name!r}, {expression})"
            return f"{COMPILER}.check({name!r})"

        self.directive(name, lambda expression: f"if {call(expression)}:")
        self.directive(f"unless{name}", lambda expression: f"if not {call(expression)}:")
        self.directive(
            f"else{name}",
            lambda expression: f"elif {call(expression)}:" if expression else "else:"
        )
        self.directive(f"end{name}", lambda expression: END_MARKER)

        # @else<name> and @end<name> only continue or close their own block
        openers = (name, f"unless{name}")
        self.condition_openers[f"else{name}"] = openers
        self.condition_openers[f"end{name}"] = openers

    def check(self, name: str, *parameters: Any) -> bool:
        """
        Check the result of a condition

        Raises:
            BladeException: If no condition is registered under name
        """
        if name not in self.conditions:
            raise BladeException(f"Condition [{name}] is not registered.")

        return bool(self.conditions[name](*parameters))

    def get_custom_directives(self) -> Dict[str, DirectiveHandler]:
        return self.custom_directives

    def get_conditions(self) -> Dict[str, Predicate]:
        return self.conditions
