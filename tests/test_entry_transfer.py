"""Tests for moving entries between lists with retrieve() and load()."""

import pytest

from fplist.core import (
    ElementRequiredError,
    Entry,
    FrequencyPriorityList,
    InvalidArgumentError,
)


def test_retrieve_removes_and_returns_counted_entry(auto_list) -> None:
    auto_list.add_to_automatic(2)

    entry = auto_list.retrieve(2)

    assert entry.element == 2
    assert entry.count == 2
    assert auto_list.to_list() == [3, 1]


def test_retrieve_manual_element(manual_list) -> None:
    entry = manual_list.retrieve(5)

    assert entry.element == 5
    assert not manual_list.contains(5)
    assert manual_list.to_list() == [3, 2, 1]


def test_retrieve_absent_element(auto_list) -> None:
    with pytest.raises(InvalidArgumentError):
        auto_list.retrieve(9)


def test_loaded_entry_keeps_its_count() -> None:
    source = FrequencyPriorityList([1, 2, 2, 2])
    target = FrequencyPriorityList([7, 7, 8])

    target.load(source.retrieve(2))

    assert target.to_list() == [2, 7, 8]
    assert target.snapshot().automatic[0].count == 3
    assert source.to_list() == [1]


def test_reloaded_entry_goes_ahead_of_equal_counts(auto_list) -> None:
    entry = auto_list.retrieve(1)

    auto_list.load(entry)

    assert auto_list.to_list() == [1, 3, 2]


def test_load_to_manual_demotes_occupant(manual_list) -> None:
    manual_list.load(Entry(9, 3), to_manual=True)

    assert manual_list.to_list() == [9, 5, 3, 2, 1]
    assert manual_list.contains_in_manual(9)
    assert manual_list.contains_in_automatic(5)
    assert manual_list.snapshot().manual.count == 3


def test_load_into_empty_list() -> None:
    lst = FrequencyPriorityList()

    lst.load(Entry("a", 4))

    assert lst.to_list() == ["a"]


def test_load_rejects_present_element(manual_list) -> None:
    with pytest.raises(InvalidArgumentError):
        manual_list.load(Entry(3))
    with pytest.raises(InvalidArgumentError):
        manual_list.load(Entry(5), to_manual=True)
    assert manual_list.to_list() == [5, 3, 2, 1]


def test_load_rejects_non_entries(auto_list) -> None:
    with pytest.raises(InvalidArgumentError):
        auto_list.load(4)


def test_load_rejects_mismatched_element_type(auto_list) -> None:
    with pytest.raises(InvalidArgumentError):
        auto_list.load(Entry("4"))
    assert len(auto_list) == 3


def test_entry_validation() -> None:
    with pytest.raises(ElementRequiredError):
        Entry(None)
    for count in (0, -1, True, 2.0):
        with pytest.raises(InvalidArgumentError):
            Entry(1, count)


def test_entries_compare_by_element() -> None:
    assert Entry(1, 1) == Entry(1, 5)
    assert Entry(1) != Entry(2)
    with pytest.raises(TypeError):
        hash(Entry(1))
