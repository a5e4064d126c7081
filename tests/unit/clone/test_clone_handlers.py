"""Tests for primkit.clone.handlers helpers."""

from types import SimpleNamespace
from typing import Any

from primkit.clone.handlers import (
    AtomicHandler,
    NodeHandler,
    ObjectHandler,
    instantiate,
    iter_attributes,
)
from primkit.clone.protocols import CloneHandler


class Unbuildable(int):
    """int subclass whose constructor always fails."""

    def __new__(cls, *args: Any) -> "Unbuildable":
        raise TypeError("no")


class Plain:
    def __init__(self) -> None:
        self.a = 1


class WithSlots:
    __slots__ = ("a", "b")


def test_builtin_handlers_satisfy_protocol() -> None:
    assert isinstance(AtomicHandler(), CloneHandler)
    assert isinstance(ObjectHandler(), CloneHandler)


def test_atomic_handler_matches_callable_instances() -> None:
    class Callable_:
        def __call__(self) -> None:
            pass

    assert AtomicHandler().matches(Callable_())
    assert not AtomicHandler().matches([])


def test_node_handler_ignores_plain_objects() -> None:
    assert not NodeHandler().matches(Plain())


class TestInstantiate:
    """Tests for instantiate() fallbacks."""

    def test_no_arg_constructor(self) -> None:
        result = instantiate(Plain)
        assert isinstance(result, Plain)
        assert result.a == 1

    def test_unbuildable_type_becomes_record(self, log_messages: list[str]) -> None:
        result = instantiate(Unbuildable)
        assert isinstance(result, SimpleNamespace)
        assert any("plain record" in m for m in log_messages)


class TestIterAttributes:
    """Tests for iter_attributes()."""

    def test_dict_attributes(self) -> None:
        assert dict(iter_attributes(Plain())) == {"a": 1}

    def test_unset_slots_skipped(self) -> None:
        value = WithSlots()
        value.a = 1
        assert dict(iter_attributes(value)) == {"a": 1}

    def test_raising_constructor_skips_init(self, log_messages: list[str]) -> None:
        class Guarded:
            def __init__(self) -> None:
                raise RuntimeError("needs a connection")

        result = instantiate(Guarded)
        assert type(result) is Guarded
        assert vars(result) == {}
        assert any("skipped __init__" in m for m in log_messages)
