"""
File Engine
Serves a view file's contents verbatim (plain .html or .css views)
"""
from typing import Any, Dict

from bladeview.support.filesystem import Filesystem
from bladeview.view.engines.engine import Engine


class FileEngine(Engine):
    """
    Engine that returns the file's contents without evaluating them

    Example:
        factory.add_extension('css', 'file', lambda: FileEngine(files))
    """

    def __init__(self, files: Filesystem):
        self.files = files

    def get(self, path: str, data: Dict[str, Any]) -> str:
        return self.files.get(path)
