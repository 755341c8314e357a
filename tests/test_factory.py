"""Tests for the view factory, views and engines."""

import os

import pytest

from bladeview.events import Dispatcher
from bladeview.exceptions import (
    CompileException,
    EngineNotFoundException,
    ViewException,
    ViewNotFoundException,
)
from bladeview.support.filesystem import Filesystem
from bladeview.view import Factory, View
from bladeview.view.engines import EngineResolver, FileEngine


class TestMake:
    def test_make_returns_unrendered_view(self, blade, write_view, views):
        write_view("pages/home.tpl", "{{ title }}")

        view = blade.make("pages/home", {"title": "Home"})

        assert isinstance(view, View)
        assert view.get_name() == "pages.home"
        assert view.get_path() == str(views / "pages" / "home.tpl")
        assert view.get_data() == {"title": "Home"}
        assert view.render() == "Home"
        assert str(view) == "Home"

    def test_merge_data_wins_over_data(self, blade, write_view):
        write_view("page.tpl", "{{ title }}")

        assert blade.make("page", {"title": "data"}, {"title": "merge"}).render() == "merge"

    def test_with_adds_data(self, blade, write_view):
        write_view("page.tpl", "{{ a }}{{ b }}")

        view = blade.make("page").with_("a", 1).with_({"b": 2})
        view["a"] = 3

        assert "a" in view
        assert view.render() == "32"

    def test_missing_view(self, blade):
        with pytest.raises(ViewNotFoundException):
            blade.make("missing")


class TestSharedData:
    def test_shared_data_and_explicit_override(self, blade, write_view):
        page = write_view("page.tpl", "<h1>{{ title }}</h1>")
        blade.share("title", "Home")

        assert blade.make("page", {}).render() == "<h1>Home</h1>"
        assert blade.file(str(page), {"title": "Override"}).render() == "<h1>Override</h1>"

    def test_share_is_not_retroactive(self, blade, write_view):
        write_view("page.tpl", "{{ title }}")
        blade.share("title", "Old")
        early = blade.make("page")

        blade.share("title", "New")

        assert early.render() == "Old"
        assert blade.make("page").render() == "New"

    def test_share_mapping_and_lookup(self, blade):
        factory = blade.get_factory()
        factory.share({"a": 1, "b": 2})

        assert factory.shared("a") == 1
        assert factory.shared("missing", "default") == "default"
        assert factory.get_shared() == {"a": 1, "b": 2}

    def test_factory_is_not_shared_data(self, blade, write_view):
        write_view("child.tpl", "{{ title }}")
        write_view("page.tpl", "@include('child')")
        factory = blade.get_factory()

        factory.share({"title": "Shared"})

        assert factory.shared("__env") is None
        assert "__env" not in blade.make("page").get_data()
        assert blade.render("page") == "Shared"


class TestHooks:
    def test_creator_fires_on_make(self, blade, write_view):
        write_view("page.tpl", "")
        created = []
        blade.creator("page", created.append)

        view = blade.make("page")

        assert created == [view]

    def test_composer_fires_before_render(self, blade, write_view):
        write_view("page.tpl", "{{ title }}")
        composed = []

        def compose(view):
            composed.append(view.get_name())
            view.with_("title", "Composed")

        blade.composer("page", compose)
        view = blade.make("page", {"title": "Data"})

        assert composed == []
        assert view.render() == "Composed"
        assert composed == ["page"]

    def test_hooks_accept_objects(self, blade, write_view):
        write_view("page.tpl", "{{ title }}")

        class PageComposer:
            def compose(self, view):
                view.with_("title", "From object")

        class PageCreator:
            def __init__(self):
                self.seen = []

            def create(self, view):
                self.seen.append(view.get_name())

        creator = PageCreator()
        blade.composer("page", PageComposer())
        blade.creator("page", creator)

        assert blade.render("page") == "From object"
        assert creator.seen == ["page"]

    def test_hook_without_method_is_rejected(self, blade):
        with pytest.raises(TypeError):
            blade.composer("page", object())

    def test_wildcards_return_matching_views(self, blade, write_view):
        write_view("admin/users.tpl", "users {{ menu }}")
        write_view("admin/roles.tpl", "roles")
        write_view("home.tpl", "home")

        matched = blade.composer("admin.*", lambda view: view.with_("menu", "M"))

        assert matched == ["admin.roles", "admin.users"]
        assert blade.render("admin.users") == "users M"

    def test_matching_is_evaluated_at_registration(self, blade, write_view, tmp_path):
        mail = tmp_path / "mail"
        write_view("welcome.tpl", "", root=mail)

        assert blade.composer("mail::*", lambda view: None) == []

        blade.add_namespace("mail", str(mail))

        assert blade.composer(["mail::*"], lambda view: None) == ["mail::welcome"]

    def test_hooks_on_namespaced_views(self, blade, write_view, tmp_path):
        mail = tmp_path / "mail"
        write_view("welcome.tpl", "{{ greeting }}", root=mail)
        blade.add_namespace("mail", str(mail))
        blade.composer("mail::*", lambda view: view.with_("greeting", "Hi"))

        assert blade.render("mail::welcome") == "Hi"

    def test_hooks_match_file_views_by_path(self, blade, write_view, tmp_path):
        page = write_view("page.tpl", "{{ title }}", root=tmp_path / "standalone")
        created = []

        blade.creator(str(page), created.append)
        blade.composer(str(page), lambda view: view.with_("title", "Composed"))
        view = blade.file(str(page), {"title": "Override"})

        assert created == [view]
        assert view.render() == "Composed"


class TestLookups:
    def test_exists(self, blade, write_view):
        write_view("page.tpl", "")

        assert blade.exists("page")
        assert not blade.exists("missing")
        assert not blade.exists("unknown::page")

    def test_exists_propagates_other_errors(self):
        class BrokenFinder:
            def find(self, name):
                raise PermissionError(name)

        factory = Factory(EngineResolver(), BrokenFinder(), Dispatcher())

        with pytest.raises(PermissionError):
            factory.exists("page")

    def test_exists_does_not_compile(self, blade, write_view, cache):
        write_view("broken.tpl", "@if(x)")

        assert blade.exists("broken")
        assert not cache.exists()

    def test_first(self, blade, write_view):
        write_view("fallback.tpl", "{{ title }}")

        assert blade.first(["missing", "fallback"], {"title": "T"}).render() == "T"

        with pytest.raises(ViewNotFoundException, match="None of the views"):
            blade.first(["missing", "also_missing"])

    def test_file_with_unknown_extension(self, blade, tmp_path):
        with pytest.raises(EngineNotFoundException, match="Unrecognized extension"):
            blade.file(str(tmp_path / "notes.txt"))


class TestRenderEach:
    def test_renders_each_item(self, blade, write_view):
        write_view("item.tpl", "{{ key }}={{ user }};")

        assert blade.render_each("item", ["a", "b"], "user") == "0=a;1=b;"
        assert blade.render_each("item", {"x": "a"}, "user") == "x=a;"

    def test_empty_fallbacks(self, blade, write_view):
        write_view("item.tpl", "{{ user }}")
        write_view("no_users.tpl", "No users")

        assert blade.render_each("item", [], "user") == ""
        assert blade.render_each("item", [], "user", "raw|Nothing here") == "Nothing here"
        assert blade.render_each("item", [], "user", "no_users") == "No users"


class TestIncludes:
    def test_include_passes_parent_data(self, blade, write_view):
        write_view("partials/greeting.tpl", "Hi {{ name }}")
        write_view("page.tpl", "@include('partials.greeting')!")

        assert blade.render("page", {"name": "Bob"}) == "Hi Bob!"

    def test_include_with_extra_data(self, blade, write_view):
        write_view("partials/greeting.tpl", "Hi {{ name }}")
        write_view("page.tpl", "@include('partials.greeting', {'name': 'Ann'})")

        assert blade.render("page", {"name": "Bob"}) == "Hi Ann"

    def test_include_namespaced_view(self, blade, write_view, tmp_path):
        mail = tmp_path / "mail"
        write_view("footer.tpl", "-- {{ sender }}", root=mail)
        write_view("letter.tpl", "Dear all @include('mail::footer')")
        blade.add_namespace("mail", str(mail))

        assert blade.render("letter", {"sender": "Ann"}) == "Dear all -- Ann"

    def test_include_missing_view(self, blade, write_view):
        write_view("page.tpl", "@include('missing')")

        with pytest.raises(ViewNotFoundException):
            blade.render("page")


class TestEngines:
    def test_runtime_errors_are_wrapped(self, blade, write_view, views):
        write_view("broken.tpl", "{{ undefined_name }}")

        with pytest.raises(ViewException) as exc_info:
            blade.render("broken")

        assert str(views / "broken.tpl") in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, NameError)

    def test_errors_do_not_poison_later_renders(self, blade, write_view):
        write_view("broken.tpl", "@if(x)")
        write_view("page.tpl", "ok")

        with pytest.raises(CompileException):
            blade.render("broken")

        assert blade.render("page") == "ok"

    def test_resolver_memoizes_engines(self):
        resolver = EngineResolver()
        built = []

        def build():
            built.append(1)
            return FileEngine(Filesystem())

        resolver.register("file", build)

        assert resolver.resolve("file") is resolver.resolve("file")
        assert built == [1]
        assert resolver.has("file")

    def test_reregistering_forgets_resolved_engine(self):
        resolver = EngineResolver()
        first, second = FileEngine(Filesystem()), FileEngine(Filesystem())
        resolver.register("file", lambda: first)
        resolver.resolve("file")

        resolver.register("file", lambda: second)

        assert resolver.resolve("file") is second

    def test_unknown_engine(self):
        with pytest.raises(EngineNotFoundException, match=r"Engine \[nope\] not found"):
            EngineResolver().resolve("nope")

    def test_file_engine_extension(self, blade, write_view):
        write_view("styles.css", "body { color: red; } {{ not_evaluated }}")

        blade.add_extension("css", "file", lambda: FileEngine(Filesystem()))

        assert blade.render("styles") == "body { color: red; } {{ not_evaluated }}"
        assert blade.get_factory().get_extensions()["css"] == "file"

    def test_compiled_code_is_reused(self, blade, write_view):
        write_view("page.tpl", "{{ n }}")
        engine = blade.make("page").get_engine()

        assert blade.render("page", {"n": 1}) == "1"
        assert blade.render("page", {"n": 2}) == "2"
        assert len(engine.compiled) == 1

    def test_rendering_unchanged_view_reuses_artifact(self, blade, write_view):
        page = write_view("page.tpl", "<p>{{ title }}</p>")

        first = blade.render("page", {"title": "Home"})
        artifact = blade.compiler().get_compiled_path(page)
        before = os.stat(artifact).st_mtime_ns

        second = blade.render("page", {"title": "Home"})

        assert first == second == "<p>Home</p>"
        assert os.stat(artifact).st_mtime_ns == before

    def test_rendering_modified_view_uses_new_content(self, blade, write_view, age):
        page = write_view("page.tpl", "Old {{ title }}")

        assert blade.render("page", {"title": "Home"}) == "Old Home"
        artifact = blade.compiler().get_compiled_path(page)
        age(artifact)
        aged = os.stat(artifact).st_mtime_ns

        write_view("page.tpl", "New {{ title }}")

        assert blade.render("page", {"title": "Home"}) == "New Home"
        assert os.stat(artifact).st_mtime_ns > aged
