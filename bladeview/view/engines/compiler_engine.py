"""
Compiler Engine
Runs compiled Blade artifacts against view data
"""
from types import CodeType
from typing import Any, Dict, Tuple

from bladeview.exceptions import BladeException, ViewException
from bladeview.logging import getLogger
from bladeview.view.compilers.blade_compiler import BladeCompiler
from bladeview.view.engines.engine import Engine
from bladeview.view.runtime import build_namespace

logger = getLogger(__name__)


class CompilerEngine(Engine):
    """
    Engine backed by a BladeCompiler

    Rendering compiles the source when its artifact is expired, loads the
    artifact as a code object and executes it in a fresh namespace holding
    the view data. Code objects are kept in memory keyed by artifact path
    and artifact modification time, so an unchanged artifact is read and
    byte-compiled once per engine.
    """

    def __init__(self, compiler: BladeCompiler):
        self.compiler = compiler
        self.compiled: Dict[str, Tuple[float, CodeType]] = {}

    def get(self, path: str, data: Dict[str, Any]) -> str:
        """
        Get the evaluated contents of the view

        Raises:
            CompileException: If the template cannot be compiled
            ViewException: If the template code raises while rendering
        """
        artifact = self.compiler.compile(path)
        code = self._load(artifact)

        namespace = build_namespace(data, self.compiler)

        try:
            exec(code, namespace)
        except BladeException:
            raise
        except Exception as e:
            raise ViewException(f"{e} (View: {path})", path=path) from e

        return ''.join(str(chunk) for chunk in namespace['__output'])

    def _load(self, artifact: str) -> CodeType:
        files = self.compiler.files
        modified = files.last_modified(artifact)

        cached = self.compiled.get(artifact)
        if cached is not None and cached[0] == modified:
            return cached[1]

        code = compile(files.get(artifact), artifact, 'exec')
        self.compiled[artifact] = (modified, code)
        logger.debug("Loaded compiled view %s", artifact)
        return code

    def get_compiler(self) -> BladeCompiler:
        return self.compiler
