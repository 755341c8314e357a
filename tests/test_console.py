"""Tests for the bladeview command line tool."""

import asyncio

import pytest

from bladeview.console import Kernel, main
from bladeview.support.filesystem import Filesystem
from bladeview.view.engines import FileEngine


def run(kernel, *argv):
    return asyncio.run(kernel.run(["bladeview", *argv]))


@pytest.fixture
def kernel(blade):
    return Kernel(blade)


class TestViewCache:
    def test_compiles_every_known_view(self, kernel, write_view, cache, capsys):
        write_view("a.tpl", "a")
        write_view("b/c.blade.html", "{{ c }}")

        assert run(kernel, "view:cache") == 0

        assert len(list(cache.glob("*.py"))) == 2
        output = capsys.readouterr().out
        assert "Compiled 2 templates" in output
        assert "b.c" in output

    def test_skips_plain_file_views(self, kernel, blade, write_view, cache):
        write_view("a.tpl", "a")
        write_view("styles.css", "body {}")
        blade.add_extension("css", "file", lambda: FileEngine(Filesystem()))

        assert run(kernel, "view:cache") == 0
        assert len(list(cache.glob("*.py"))) == 1

    def test_reports_compile_errors(self, kernel, write_view, capsys):
        write_view("broken.tpl", "@if(x)")

        assert run(kernel, "view:cache") == 1
        assert "Failed to compile [broken]" in capsys.readouterr().out

    def test_no_templates(self, kernel, capsys):
        assert run(kernel, "view:cache") == 0
        assert "No templates found" in capsys.readouterr().out


class TestViewClear:
    def test_removes_compiled_views(self, kernel, write_view, cache, capsys):
        write_view("a.tpl", "a")
        write_view("b.tpl", "b")
        run(kernel, "view:cache")
        (cache / "keep.txt").write_text("", encoding="utf-8")

        assert run(kernel, "view:clear") == 0

        assert list(cache.glob("*.py")) == []
        assert (cache / "keep.txt").exists()
        assert "Cleared 2 compiled views" in capsys.readouterr().out

    def test_nothing_to_clear(self, kernel, capsys):
        assert run(kernel, "view:clear") == 0
        assert "No compiled views to clear" in capsys.readouterr().out

    def test_cleared_views_recompile(self, kernel, blade, write_view):
        write_view("page.tpl", "ok")
        assert blade.render("page") == "ok"

        run(kernel, "view:clear")

        assert blade.render("page") == "ok"


class TestContainerCommands:
    def test_list(self, kernel, capsys):
        assert run(kernel, "container:list") == 0

        output = capsys.readouterr().out
        assert "view.finder" in output
        assert "blade.compiler" in output

    def test_check(self, kernel, capsys):
        assert run(kernel, "container:check", "view") == 0
        assert "Binding 'view' exists" in capsys.readouterr().out

        assert run(kernel, "container:check", "mailer") == 1
        assert run(kernel, "container:check") == 1


class TestKernel:
    def test_help(self, kernel, capsys):
        assert run(kernel) == 0
        assert run(kernel, "help") == 0

        output = capsys.readouterr().out
        assert "view:cache" in output
        assert "container:list" in output

    def test_help_for_command(self, kernel, capsys):
        assert run(kernel, "help", "view:clear") == 0
        assert "Clear all compiled view files" in capsys.readouterr().out

        assert run(kernel, "help", "nope") == 1

    def test_unknown_command(self, kernel, capsys):
        assert run(kernel, "nope") == 1
        assert "Unknown command: nope" in capsys.readouterr().out

    def test_options_build_blade(self, views, cache, tmp_path, write_view):
        write_view("page.tpl", "ok")
        kernel = Kernel()

        exit_code = run(
            kernel, f"--views={views}", f"--cache={cache}", f"--env={tmp_path / 'none.env'}", "view:cache"
        )

        assert exit_code == 0
        assert kernel.blade.get_container().make("config").get("view.compiled") == str(cache)
        assert len(list(cache.glob("*.py"))) == 1

    def test_parse_args(self):
        args, options = Kernel(commands=[])._parse_args(
            ["--views=a", "--verbose", "-q", "view:cache", "extra", "--json=false"]
        )

        assert args == ["view:cache", "extra"]
        assert options == {"views": "a", "verbose": True, "q": True, "json": False}

    def test_main(self, capsys):
        assert main(["bladeview", "help"]) == 0
        assert "view:clear" in capsys.readouterr().out
