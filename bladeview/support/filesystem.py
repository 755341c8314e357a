"""
Filesystem - file primitives used by the view pipeline
Provides consistent path handling and atomic writes for the compiled view cache
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Union

PathLike = Union[str, Path]


class Filesystem:
    """
    File access helper (Laravel-style)

    Every operation surfaces OSError (FileNotFoundError, PermissionError, ...)
    to the caller; nothing is swallowed.
    """

    def exists(self, path: PathLike) -> bool:
        """Check if file or directory exists"""
        return Path(path).exists()

    def is_file(self, path: PathLike) -> bool:
        """Check if path is a regular file"""
        return Path(path).is_file()

    def is_directory(self, path: PathLike) -> bool:
        """Check if path is directory"""
        return Path(path).is_dir()

    def get(self, path: PathLike, encoding: str = 'utf-8') -> str:
        """
        Read file contents

        Raises:
            FileNotFoundError: If the file does not exist
        """
        with open(path, 'r', encoding=encoding) as f:
            return f.read()

    def put(self, path: PathLike, contents: str, encoding: str = 'utf-8') -> int:
        """
        Write file contents atomically

        The contents are written to a temporary file in the destination
        directory and renamed into place, so readers never observe a
        partially written file.

        Returns:
            Number of characters written
        """
        path_obj = Path(path)
        fd, tmp_path = tempfile.mkstemp(
            dir=str(path_obj.parent),
            prefix=f'.{path_obj.name}.',
            suffix='.tmp'
        )
        try:
            with os.fdopen(fd, 'w', encoding=encoding) as f:
                f.write(contents)
            os.replace(tmp_path, path_obj)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        return len(contents)

    def last_modified(self, path: PathLike) -> float:
        """Get file modification time (seconds since the epoch)"""
        return Path(path).stat().st_mtime

    def ensure_directory(self, path: PathLike) -> Path:
        """
        Ensure directory exists, create if it doesn't

        Returns:
            Path object
        """
        path_obj = Path(path)
        path_obj.mkdir(parents=True, exist_ok=True)
        return path_obj

    def delete(self, path: PathLike) -> bool:
        """Delete a file; returns False when it did not exist"""
        path_obj = Path(path)
        if not path_obj.exists():
            return False
        path_obj.unlink()
        return True

    def delete_directory(self, path: PathLike, recursive: bool = True) -> None:
        """
        Delete directory and optionally its contents

        Raises:
            OSError: If directory is not empty and recursive=False
        """
        path_obj = Path(path)

        if not path_obj.exists():
            return

        if not path_obj.is_dir():
            raise NotADirectoryError(f"{path} is not a directory")

        if recursive:
            shutil.rmtree(path_obj)
        else:
            path_obj.rmdir()

    def glob(self, pattern: str, directory: PathLike) -> List[Path]:
        """Find files matching pattern in directory (sorted)"""
        directory = Path(directory)
        if not directory.is_dir():
            return []
        return sorted(directory.glob(pattern))

    def all_files(self, directory: PathLike) -> List[Path]:
        """Recursively list every file below directory (sorted)"""
        directory = Path(directory)
        if not directory.is_dir():
            return []
        return sorted(p for p in directory.rglob('*') if p.is_file())
