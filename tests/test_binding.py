from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from cmdtree import (
    AttributeBinding,
    BindingError,
    CallbackBinding,
    Command,
    ItemBinding,
    ValueType,
    bind,
    parse,
)


@dataclass
class Target:
    value: int = 0


def test_attribute_binding():
    target = Target()
    AttributeBinding("value").apply(target, 3)
    assert target.value == 3


def test_attribute_binding_checks_target_type():
    binding = AttributeBinding("value", Target)
    binding.apply(Target(), 1)
    with pytest.raises(BindingError):
        binding.apply(SimpleNamespace(), 1)


def test_attribute_binding_needs_a_target():
    with pytest.raises(BindingError):
        AttributeBinding("value").apply(None, 1)


def test_item_binding():
    target: dict = {}
    ItemBinding("value").apply(target, [1, 2])
    assert target == {"value": [1, 2]}
    with pytest.raises(BindingError):
        ItemBinding("value").apply(Target(), 1)


def test_callback_binding():
    received = []
    binding = CallbackBinding(lambda target, value: received.append((target, value)))
    binding.apply("t", 1)
    assert received == [("t", 1)]


def test_bind_dispatch():
    existing = ItemBinding("key")
    assert bind(existing) is existing
    assert bind("value") == AttributeBinding("value")
    assert bind("value", Target) == AttributeBinding("value", Target)
    assert isinstance(bind(lambda target, value: None), CallbackBinding)
    with pytest.raises(BindingError):
        bind("")
    with pytest.raises(BindingError):
        bind(42)


def test_mismatched_bind_target_is_a_programming_error():
    root = Command.root("prog", bind_target=SimpleNamespace()).tagged(
        "value", type=ValueType.int(), binding="value", target_type=Target
    )
    with pytest.raises(BindingError):
        parse(["-value", "1"], root)


def test_missing_bind_target_is_a_programming_error():
    root = Command.root("prog").tagged("value", binding="value")
    with pytest.raises(BindingError):
        parse(["-value", "1"], root)


def test_callback_bindings_receive_the_bind_target():
    seen = []
    target = object()
    root = Command.root("prog", bind_target=target).tagged(
        "flag",
        type=ValueType.toggle(),
        binding=lambda owner, value: seen.append((owner, value)),
    )
    parse(["-noflag"], root)
    assert seen == [(target, False)]
