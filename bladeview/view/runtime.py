"""
Render-time helpers available to compiled views

Compiled artifacts are plain Python modules executed against a fresh
namespace built by build_namespace(). The helper names below are the
contract between BladeCompiler (which emits calls to them) and
CompilerEngine (which provides them).
"""
import json
from typing import Any, Callable, Dict, Iterable, List, Optional

from markupsafe import Markup, escape

from bladeview.exceptions import BladeException

ECHO = '__echo'
ESCAPE = '__e'
RAW = '__raw'
JSON = '__json'
LOOP = '__loop'
PAIRS = '__pairs'
ISSET = '__isset'
EMPTY = '__empty'
INCLUDE = '__include'
COMPILER = '__blade'
ENV = '__env'


def escape_value(value: Any) -> str:
    """HTML-escape a value for {{ }} echoes; None renders as an empty string"""
    if value is None:
        return ''
    return str(escape(value))


def raw_value(value: Any) -> str:
    """Stringify a value for {!! !!} echoes without escaping"""
    if value is None:
        return ''
    return str(value)


def to_json(value: Any, **options: Any) -> Markup:
    """
    Encode value as JSON safe for embedding in HTML and <script> tags

    Example:
        <script>var user = @json(user);</script>
    """
    encoded = json.dumps(value, **options)
    encoded = (
        encoded.replace('<', '\\u003c')
        .replace('>', '\\u003e')
        .replace('&', '\\u0026')
        .replace("'", '\\u0027')
    )
    return Markup(encoded)


def pairs(value: Any) -> Iterable:
    """(key, value) pairs of a mapping, or (index, item) pairs of a sequence"""
    if hasattr(value, 'items'):
        return list(value.items())
    return list(enumerate(value))


def isset(getter: Callable[[], Any]) -> bool:
    """True when the expression is defined and not None"""
    try:
        return getter() is not None
    except (NameError, KeyError, IndexError, AttributeError):
        return False


def is_empty(getter: Callable[[], Any]) -> bool:
    """True when the expression is undefined or falsy"""
    try:
        return not getter()
    except (NameError, KeyError, IndexError, AttributeError):
        return True


class Loop:
    """
    Loop iteration metadata accessible as `loop` inside @foreach blocks

    Properties:
        index: 0-based iteration count
        iteration: 1-based iteration count
        remaining: Items left after the current one
        count: Total number of items
        first / last: Boundary flags
        even / odd: Parity of `iteration`
        depth: Nesting level (1 for the outermost loop)
        parent: Enclosing Loop, or None

    Example:
        @foreach(users as user)
            @if(loop.first) <ul> @endif
            <li>{{ loop.iteration }}. {{ user.name }}</li>
            @if(loop.last) </ul> @endif
        @endforeach
    """

    __slots__ = ("_items", "_index", "parent")

    def __init__(self, items: Iterable, parent: Optional['Loop'] = None):
        self._items: List[Any] = list(items)
        self._index = -1
        self.parent = parent

    def __iter__(self):
        for i, item in enumerate(self._items):
            self._index = i
            yield item

    @property
    def index(self) -> int:
        return self._index

    @property
    def iteration(self) -> int:
        return self._index + 1

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def remaining(self) -> int:
        return len(self._items) - self._index - 1

    @property
    def first(self) -> bool:
        return self._index == 0

    @property
    def last(self) -> bool:
        return self._index == len(self._items) - 1

    @property
    def even(self) -> bool:
        return self.iteration % 2 == 0

    @property
    def odd(self) -> bool:
        return self.iteration % 2 == 1

    @property
    def depth(self) -> int:
        return 1 if self.parent is None else self.parent.depth + 1

    def __repr__(self) -> str:
        return f"<Loop {self.iteration}/{self.count} depth={self.depth}>"


def build_namespace(data: Dict[str, Any], compiler: Any) -> Dict[str, Any]:
    """
    Build the execution namespace for a compiled view

    Args:
        data: Final merged view data
        compiler: Compiler whose conditions back @name conditional directives

    Returns:
        Namespace dict; the captured output is under the '__output' key
    """
    namespace: Dict[str, Any] = dict(data)
    output: List[str] = []

    def loop(items: Iterable):
        previous = namespace.get('loop')
        context = Loop(items, previous if isinstance(previous, Loop) else None)
        try:
            for item in context:
                namespace['loop'] = context
                yield item
        finally:
            if previous is None:
                namespace.pop('loop', None)
            else:
                namespace['loop'] = previous

    def include(view: str, extra: Optional[Dict[str, Any]] = None) -> str:
        env = namespace.get(ENV)
        if env is None:
            raise BladeException(f"Cannot include [{view}]: no view factory is available")
        variables = {
            key: value for key, value in namespace.items()
            if not key.startswith('__') and key != 'loop'
        }
        return env.make(view, variables, extra).render()

    namespace.update({
        '__output': output,
        ECHO: output.append,
        ESCAPE: escape_value,
        RAW: raw_value,
        JSON: to_json,
        LOOP: loop,
        PAIRS: pairs,
        ISSET: isset,
        EMPTY: is_empty,
        INCLUDE: include,
        COMPILER: compiler,
    })
    return namespace
