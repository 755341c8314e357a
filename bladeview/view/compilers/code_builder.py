"""
Python source builder for compiled views

Tracks indentation and open blocks while the Blade compiler emits
statements, so block-structure mistakes in a template surface as
CompileException with the offending directive and template line.
"""
import re
from typing import List, Optional, Sequence, Tuple

from bladeview.exceptions import CompileException

INDENT = '    '
END_MARKER = '#end'

_KIND_RE = re.compile(r'^(\w+)')
_CONTINUATIONS = {
    'elif': ('if',),
    'else': ('if', 'for', 'while', 'try'),
    'except': ('try',),
    'finally': ('try',),
}


class _Block:
    __slots__ = ('kind', 'directive', 'line')

    def __init__(self, kind: str, directive: Optional[str], line: Optional[int]):
        self.kind = kind
        self.directive = directive
        self.line = line


class CodeBuilder:
    """
    Accumulate indented Python statements

    Every emitted line remembers the directive and template line it came
    from (see origin()), used to attribute Python syntax errors.
    """

    def __init__(self):
        self.lines: List[str] = []
        self.origins: List[Tuple[Optional[str], Optional[int]]] = []
        self.blocks: List[_Block] = []

    @property
    def depth(self) -> int:
        return len(self.blocks)

    def emit(self, code: str, directive: Optional[str] = None, line: Optional[int] = None) -> None:
        """Emit a single statement at the current depth"""
        first, *rest = code.split('\n')
        self.lines.append(INDENT * self.depth + first)
        self.origins.append((directive, line))
        for physical in rest:
            # Continuation lines of a bracketed expression keep their text
            self.lines.append(physical)
            self.origins.append((directive, line))

    def open(self, code: str, directive: Optional[str] = None, line: Optional[int] = None,
             kind: Optional[str] = None) -> None:
        """Emit a block header (ending with ':') and indent"""
        self.emit(code, directive, line)
        self.blocks.append(_Block(kind or self._kind_of(code), directive, line))
        self.emit('pass', directive, line)

    def middle(self, code: str, directive: Optional[str] = None, line: Optional[int] = None,
               kinds: Optional[Sequence[str]] = None, openers: Optional[Sequence[str]] = None) -> None:
        """
        Emit an elif/else style continuation of the innermost block

        With openers, the innermost block must have been opened by one of
        those directives.
        """
        keyword = self._kind_of(code)
        allowed = kinds or _CONTINUATIONS.get(keyword, ())

        if not self.blocks or self.blocks[-1].kind not in allowed \
                or (openers and self.blocks[-1].directive not in openers):
            raise CompileException(
                f"Unexpected @{directive or keyword}", directive=directive, line=line
            )

        block = self.blocks.pop()
        self.emit(code, directive, line)
        self.blocks.append(block)
        self.emit('pass', directive, line)

    def close(self, directive: Optional[str] = None, line: Optional[int] = None,
              kinds: Optional[Sequence[str]] = None, openers: Optional[Sequence[str]] = None) -> None:
        """Close the innermost block, optionally checking its kind or opening directive"""
        if not self.blocks:
            raise CompileException(
                f"Unexpected @{directive or 'end'} without an open block",
                directive=directive, line=line
            )

        block = self.blocks[-1]
        if (kinds and block.kind not in kinds) or (openers and block.directive not in openers):
            opener = f"@{block.directive}" if block.directive else block.kind
            raise CompileException(
                f"Unexpected @{directive}; {opener} opened on line {block.line} is still open",
                directive=directive, line=line
            )

        self.blocks.pop()

    def in_block(self, kinds: Sequence[str]) -> bool:
        """Whether any enclosing block has one of the given kinds"""
        return any(block.kind in kinds for block in self.blocks)

    def add(self, code: str, directive: Optional[str] = None, line: Optional[int] = None,
            openers: Optional[Sequence[str]] = None) -> None:
        """
        Add free-form code returned by a custom directive

        Each line is classified: '#end' closes a block, elif/else/except/
        finally continue one, a trailing ':' opens one, anything else is a
        plain statement. Closing and continuation lines honor openers.
        """
        for physical in code.splitlines():
            stripped = physical.strip()
            if not stripped:
                continue

            if stripped == END_MARKER:
                self.close(directive, line, openers=openers)
            elif self._kind_of(stripped) in _CONTINUATIONS and stripped.endswith(':'):
                self.middle(stripped, directive, line, openers=openers)
            elif stripped.endswith(':'):
                self.open(stripped, directive, line)
            else:
                self.emit(stripped, directive, line)

    def finish(self) -> str:
        """
        Return the assembled source

        Raises:
            CompileException: If a block is still open
        """
        if self.blocks:
            block = self.blocks[-1]
            name = block.directive or block.kind
            raise CompileException(
                f"Unclosed @{name} block", directive=block.directive, line=block.line
            )

        return '\n'.join(self.lines) + '\n'

    def origin(self, lineno: int, offset: int = 0) -> Tuple[Optional[str], Optional[int]]:
        """Map a 1-based generated line number to (directive, template line)"""
        index = lineno - 1 - offset
        if 0 <= index < len(self.origins):
            return self.origins[index]
        return None, None

    @staticmethod
    def _kind_of(code: str) -> str:
        match = _KIND_RE.match(code.strip())
        return match.group(1) if match else ''
