"""Test configuration for the fplist project."""

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fplist.core import FrequencyPriorityList  # noqa: E402


@pytest.fixture
def auto_list() -> FrequencyPriorityList[int]:
    """List holding 3, 2, 1 (all count 1) in automatic ordering."""

    lst: FrequencyPriorityList[int] = FrequencyPriorityList()
    lst.add_to_automatic(1)
    lst.add_to_automatic(2)
    lst.add_to_automatic(3)
    return lst


@pytest.fixture
def manual_list(auto_list: FrequencyPriorityList[int]) -> FrequencyPriorityList[int]:
    """``auto_list`` with 5 pinned to the manual slot."""

    auto_list.add_to_manual(5)
    return auto_list


def _check_sorted(lst: FrequencyPriorityList) -> None:
    counts = [item.count for item in lst.snapshot().automatic]
    assert counts == sorted(counts, reverse=True), counts


@pytest.fixture
def assert_sorted():
    """Callable asserting the automatic region is ordered by descending count."""

    return _check_sorted
