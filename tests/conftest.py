"""Pytest configuration and fixtures for bladeview tests."""

import os

import pytest

from bladeview import Blade
from bladeview.support.env_helper import EnvHelper
from bladeview.support.filesystem import Filesystem
from bladeview.view.compilers import BladeCompiler


@pytest.fixture
def views(tmp_path):
    """Directory holding the global view templates."""
    directory = tmp_path / "views"
    directory.mkdir()
    return directory


@pytest.fixture
def cache(tmp_path):
    """Compiled view directory (created on first compile)."""
    return tmp_path / "cache"


@pytest.fixture
def write_view(views):
    """Write a template below the views directory (or another root)."""

    def write(name, contents, root=None):
        path = (root or views) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        return path

    return write


@pytest.fixture
def age():
    """Move a file's modification time into the past."""

    def move(path, seconds=100):
        stat = os.stat(path)
        os.utime(path, (stat.st_atime - seconds, stat.st_mtime - seconds))

    return move


@pytest.fixture
def files():
    return Filesystem()


@pytest.fixture
def compiler(files, cache):
    """A BladeCompiler writing into the temporary cache directory."""
    return BladeCompiler(files, str(cache))


@pytest.fixture
def blade(views, cache):
    """A Blade instance over the temporary views and cache directories."""
    return Blade(str(views), str(cache))


@pytest.fixture
def render_string(tmp_path, blade):
    """Compile and render an inline template through a Blade instance."""
    counter = {"n": 0}

    def render(source, data=None, instance=None):
        counter["n"] += 1
        path = tmp_path / "inline" / f"inline_{counter['n']}.tpl"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return (instance or blade).file(str(path), data or {}).render()

    return render


@pytest.fixture(autouse=True)
def reset_env_helper():
    """EnvHelper keeps class-level state; start every test fresh."""
    EnvHelper.reset()
    yield
    EnvHelper.reset()
