from __future__ import annotations

import pytest

from trapper.core.errors import ArgumentError, ErrorKind
from trapper.model import Sample, NS_MAX


def test_required_fields_and_defaults():
    s = Sample("h", "k", "v")
    assert (s.host, s.key, s.value) == ("h", "k", "v")
    assert s.clock is None
    assert s.ns is None


@pytest.mark.parametrize("host,key", [("", "k"), ("h", ""), (None, "k"), ("h", None)])
def test_empty_or_missing_host_key_rejected(host, key):
    with pytest.raises(ArgumentError):
        Sample(host, key, "v")


def test_value_none_rejected():
    with pytest.raises(ArgumentError):
        Sample("h", "k", None)


def test_numeric_value_is_carried_as_string():
    assert Sample("h", "k", 42).value == "42"
    assert Sample("h", "k", 1.5).value == "1.5"


def test_bool_value_rejected():
    with pytest.raises(ArgumentError):
        Sample("h", "k", True)


@pytest.mark.parametrize("ns", [-1, NS_MAX + 1])
def test_with_ns_out_of_range_fails_and_leaves_sample_untouched(ns):
    s = Sample("h", "k", "v").with_ns(5)
    with pytest.raises(ArgumentError) as ei:
        s.with_ns(ns)
    assert ei.value.kind is ErrorKind.ARGUMENT
    assert s.ns == 5


@pytest.mark.parametrize("ns", [0, NS_MAX])
def test_with_ns_bounds_accepted(ns):
    assert Sample("h", "k", "v").with_ns(ns).ns == ns


def test_argument_error_is_a_value_error():
    with pytest.raises(ValueError):
        Sample("h", "k", "v").with_ns(-1)


def test_with_clock_returns_new_sample():
    s = Sample("h", "k", "v")
    t = s.with_clock(1700000000)
    assert t.clock == 1700000000
    assert s.clock is None


def test_with_clock_rejects_out_of_int64():
    with pytest.raises(ArgumentError):
        Sample("h", "k", "v").with_clock(1 << 63)
    assert Sample("h", "k", "v").with_clock(-(1 << 63)).clock == -(1 << 63)


def test_with_timestamp_sets_both():
    s = Sample("h", "k", "v").with_timestamp(10, 20)
    assert (s.clock, s.ns) == (10, 20)


def test_constructor_validates_ns():
    with pytest.raises(ArgumentError):
        Sample("h", "k", "v", clock=1, ns=1_000_000_000)


def test_equality_and_hash_are_structural():
    a = Sample("h", "k", "v", clock=1, ns=2)
    b = Sample("h", "k", "v").with_timestamp(1, 2)
    assert a == b
    assert hash(a) == hash(b)
    assert Sample("h", "k", "v") != Sample("h", "k", "v", clock=0)
    assert Sample("h", "k", "v") != Sample("h", "k", "v", ns=0)


def test_sample_is_frozen():
    s = Sample("h", "k", "v")
    with pytest.raises(AttributeError):
        s.clock = 5  # type: ignore[misc]


def test_as_dict_omits_unset_timestamps():
    assert Sample("h", "k", "v").as_dict() == {"host": "h", "key": "k", "value": "v"}
    assert Sample("h", "k", "v", ns=7).as_dict() == {"host": "h", "key": "k", "value": "v", "ns": 7}
    assert list(Sample("h", "k", "v", clock=1, ns=2).as_dict()) == ["host", "key", "value", "clock", "ns"]


def test_repr_lists_only_set_fields():
    assert repr(Sample("h", "k", "v")) == "Sample(host='h', key='k', value='v')"
    assert repr(Sample("h", "k", "v", clock=3)) == "Sample(host='h', key='k', value='v', clock=3)"


@pytest.mark.parametrize("field", ["host", "key", "value"])
def test_lone_surrogate_rejected(field):
    kwargs = {"host": "h", "key": "k", "value": "v", field: "bad\ud800"}
    with pytest.raises(ArgumentError) as ei:
        Sample(**kwargs)
    assert field in ei.value.message


def test_empty_value_is_allowed():
    assert Sample("h", "k", "").value == ""
