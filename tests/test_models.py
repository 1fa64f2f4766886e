"""Tests for the hosts line records."""

import dataclasses

import pytest

from hostsfile.models import Comment, Empty, Entry


def test_entry_requires_a_hostname() -> None:
    with pytest.raises(ValueError):
        Entry("127.0.0.1", ())


def test_entry_hostnames_stored_as_tuple() -> None:
    entry = Entry("127.0.0.1", ["localhost", "local"])
    assert entry.hostnames == ("localhost", "local")
    assert entry == Entry("127.0.0.1", ("localhost", "local"))


def test_records_are_frozen() -> None:
    entry = Entry("127.0.0.1", ("localhost",))
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.ip = "10.0.0.1"


def test_structural_equality_between_variants() -> None:
    assert Empty() == Empty()
    assert Comment("") != Empty()
    assert Comment("x") == Comment("x")


@pytest.mark.parametrize("line, text", [
    (Empty(), ""),
    (Comment(""), "#"),
    (Comment("note"), "# note"),
    (Entry("1.1.1.1", ("a", "b")), "1.1.1.1\ta\tb"),
    (Entry("1.1.1.1", ("a",), "note"), "1.1.1.1\ta\t# note"),
    (Entry("1.1.1.1", ("a",), ""), "1.1.1.1\ta\t#"),
])
def test_to_hosts_line(line, text: str) -> None:
    assert line.to_hosts_line() == text
