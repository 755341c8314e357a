"""Tests for the service container."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from bladeview.container import Container
from bladeview.exceptions import BindingNotFoundException, ContainerException

keys = st.text(min_size=1, max_size=30)


class Counter:
    """Factory that records how often it was invoked."""

    def __init__(self):
        self.calls = 0

    def __call__(self, container):
        self.calls += 1
        return object()


class TestBindIf:
    @given(key=keys)
    @settings(max_examples=100)
    def test_first_registration_wins(self, key):
        """bind_if never replaces an existing binding and never calls the loser."""
        container = Container()
        first, second = Counter(), Counter()

        assert container.bind_if(key, first) is True
        assert container.bind_if(key, second) is False

        instance = container.get(key)

        assert first.calls == 1
        assert second.calls == 0
        assert container.get(key) is instance

    def test_prebound_instance_survives(self):
        container = Container()
        marker = object()
        container.instance("files", marker)

        container.bind_if("files", lambda c: object())

        assert container.make("files") is marker

    def test_registration_is_lazy(self):
        container = Container()
        factory = Counter()
        container.bind_if("view", factory)

        assert factory.calls == 0
        assert not container.resolved("view")


class TestResolution:
    @given(key=keys, lookups=st.integers(min_value=2, max_value=10))
    @settings(max_examples=50)
    def test_singleton_factory_runs_once(self, key, lookups):
        container = Container()
        factory = Counter()
        container.bind_if(key, factory)

        instances = {id(container.get(key)) for _ in range(lookups)}

        assert factory.calls == 1
        assert len(instances) == 1

    def test_factory_binding_builds_every_time(self):
        container = Container()
        factory = Counter()
        container.bind("fresh", factory)

        assert container.make("fresh") is not container.make("fresh")
        assert factory.calls == 2

    def test_factories_receive_the_container(self):
        container = Container()
        container.bind_if("config", lambda c: {"name": "blade"})
        container.bind_if("greeting", lambda c: f"hello {c.make('config')['name']}")

        assert container.make("greeting") == "hello blade"

    def test_unbound_key_raises(self):
        with pytest.raises(BindingNotFoundException) as exc_info:
            Container().make("missing")

        assert exc_info.value.key == "missing"
        assert isinstance(exc_info.value, ContainerException)

    def test_failing_factory_can_be_retried(self):
        container = Container()
        attempts = []

        def flaky(c):
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("boom")
            return "ok"

        container.bind_if("flaky", flaky)

        with pytest.raises(RuntimeError):
            container.make("flaky")

        assert container.make("flaky") == "ok"

    def test_resolved_binding_cannot_be_replaced(self):
        container = Container()
        container.singleton("view", lambda c: object())
        container.make("view")

        with pytest.raises(ContainerException):
            container.singleton("view", lambda c: object())

    def test_unresolved_binding_can_be_replaced(self):
        container = Container()
        container.singleton("view", lambda c: "first")
        container.singleton("view", lambda c: "second")

        assert container.make("view") == "second"

    def test_singleton_with_instance(self):
        container = Container()
        marker = object()
        container.singleton("marker", marker)

        assert container.resolved("marker")
        assert container.make("marker") is marker


class TestIntrospection:
    def test_has_and_contains(self):
        container = Container()
        container.bind_if("files", lambda c: object())

        assert container.has("files")
        assert "files" in container
        assert not container.bound("events")

    def test_get_bindings_reports_state(self):
        container = Container()
        container.bind_if("lazy", lambda c: 1)
        container.bind_if("built", lambda c: 2)
        container.bind("fresh", lambda c: 3)
        container.make("built")

        assert container.get_bindings() == {
            "lazy": {"type": "singleton", "instantiated": False},
            "built": {"type": "singleton", "instantiated": True},
            "fresh": {"type": "factory", "instantiated": None},
        }

    def test_list_bindings(self):
        container = Container()
        container.bind_if("view", lambda c: 1)
        container.bind("fresh", lambda c: 2)

        listing = container.list_bindings()

        assert "Singletons:" in listing
        assert "view" in listing
        assert "[lazy]" in listing
        assert "Factories (bind):" in listing

    def test_list_bindings_empty(self):
        assert Container().list_bindings() == "No bindings registered in container."
