"""Tests for spies."""

import pytest

from expectkit.spy import Spy, create_spy, is_spy, spy_on


class Service:
    def fetch(self, key):
        return f"real:{key}"


def test_spy_records_calls():
    spy = create_spy("cb")
    assert spy.was_called is False
    assert spy.most_recent_call is None

    spy(1, 2)
    spy("x")

    assert spy.was_called is True
    assert spy.call_count == 2
    assert spy.args_for_call == [[1, 2], ["x"]]
    assert spy.most_recent_call == ["x"]


def test_spy_plans():
    assert create_spy().and_return(7)() == 7
    assert create_spy().and_call_fake(lambda a, b: a + b)(2, 3) == 5
    with pytest.raises(KeyError):
        create_spy().and_raise(KeyError("k"))()


def test_reset():
    spy = create_spy()
    spy(1)
    spy.reset()
    assert spy.call_count == 0
    assert spy.args_for_call == []


def test_spy_on_replaces_and_restores_instance_method():
    service = Service()
    spy = spy_on(service, "fetch")

    assert is_spy(service.fetch)
    assert service.fetch("a") is None
    assert spy.identity == "fetch"
    assert spy.and_call_through() is spy
    assert service.fetch("b") == "real:b"

    spy.restore()
    assert not is_spy(service.fetch)
    assert service.fetch("c") == "real:c"


def test_spy_on_instance_attribute_restores_original():
    class Holder:
        pass

    def original():
        return "orig"

    holder = Holder()
    holder.run = original
    spy_on(holder, "run").restore()
    assert holder.run is original


def test_spy_on_missing_method():
    with pytest.raises(AttributeError, match="does not exist"):
        spy_on(Service(), "nope")


def test_spy_on_twice_rejected():
    service = Service()
    spy_on(service, "fetch")
    with pytest.raises(ValueError, match="already been spied upon"):
        spy_on(service, "fetch")


def test_call_through_without_original():
    with pytest.raises(ValueError):
        Spy("bare").and_call_through()
