"""
Base Compiler
Compiled-artifact location and freshness rules shared by all compilers
"""
import hashlib
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from bladeview.defaults import DEFAULT_COMPILED_EXTENSION
from bladeview.support.filesystem import Filesystem


class Compiler(ABC):
    """
    Abstract template compiler backed by a cache directory

    The cache holds one artifact per source template, named from the sha1
    of the source's absolute path, so re-running without source changes is
    a cache hit. An artifact is fresh when its modification time is not
    older than the source's; no content hashing is involved.
    """

    def __init__(
        self,
        files: Filesystem,
        cache_path: Union[str, Path],
        compiled_extension: str = DEFAULT_COMPILED_EXTENSION
    ):
        if not cache_path:
            raise ValueError("Please provide a valid cache path.")

        self.files = files
        self.cache_path = str(cache_path)
        self.compiled_extension = compiled_extension

    def get_compiled_path(self, path: Union[str, Path]) -> str:
        """Get the path to the compiled version of a view"""
        digest = hashlib.sha1(os.path.abspath(str(path)).encode('utf-8')).hexdigest()
        return os.path.join(self.cache_path, f"{digest}.{self.compiled_extension}")

    def is_expired(self, path: Union[str, Path]) -> bool:
        """
        Determine if the view at the given path is expired

        Raises:
            FileNotFoundError: If the source itself does not exist
        """
        compiled = self.get_compiled_path(path)

        if not self.files.exists(compiled):
            return True

        return self.files.last_modified(compiled) < self.files.last_modified(path)

    def ensure_compiled_directory_exists(self) -> None:
        """Create the cache directory if it does not exist"""
        self.files.ensure_directory(self.cache_path)

    def get_cache_path(self) -> str:
        return self.cache_path

    @abstractmethod
    def compile(self, path: Union[str, Path]) -> str:
        """Compile the view at the given path and return the artifact path"""
