"""Tests for mapping restriction snapshots to blocked functions."""

from __future__ import annotations

from itertools import combinations

import pytest

from uxguard.models import AppFunction, RestrictionSnapshot
from uxguard.policy import FLAG_TO_FUNCTION, decode
from uxguard.restrictions import RestrictionFlags


def _snapshot(flags: int, *, requires_optimization: bool = True) -> RestrictionSnapshot:
    return RestrictionSnapshot(active_flags=flags, requires_optimization=requires_optimization)


def test_mapping_table() -> None:
    assert dict(FLAG_TO_FUNCTION) == {
        RestrictionFlags.NO_DIALPAD: AppFunction.call,
        RestrictionFlags.NO_FILTERING: AppFunction.message,
        RestrictionFlags.NO_VIDEO: AppFunction.video,
        RestrictionFlags.NO_KEYBOARD: AppFunction.keyboard,
        RestrictionFlags.LIMIT_STRING_LENGTH: AppFunction.limit_string_length,
    }


def test_every_flag_subset_decodes_exactly() -> None:
    """Any combination of flags blocks exactly the mapped functions."""
    flags = list(FLAG_TO_FUNCTION)
    for size in range(len(flags) + 1):
        for subset in combinations(flags, size):
            mask = 0
            for flag in subset:
                mask |= flag
            expected = {FLAG_TO_FUNCTION[flag] for flag in subset}
            assert decode(_snapshot(mask)) == expected


def test_example_combination() -> None:
    mask = (
        RestrictionFlags.NO_DIALPAD
        | RestrictionFlags.NO_VIDEO
        | RestrictionFlags.LIMIT_STRING_LENGTH
    )
    assert decode(_snapshot(mask)) == {
        AppFunction.call,
        AppFunction.video,
        AppFunction.limit_string_length,
    }


@pytest.mark.parametrize("flags", [0, 1, 17, 31, 0xFFFF])
def test_optimization_not_required_blocks_nothing(flags: int) -> None:
    assert decode(_snapshot(flags, requires_optimization=False)) == frozenset()


def test_no_snapshot_blocks_nothing() -> None:
    assert decode(None) == frozenset()


def test_zero_flags_block_nothing() -> None:
    assert decode(_snapshot(0)) == frozenset()


def test_undefined_bits_are_ignored() -> None:
    assert decode(_snapshot(32 | 64 | 1024)) == frozenset()
    assert decode(_snapshot(32 | RestrictionFlags.NO_KEYBOARD)) == {AppFunction.keyboard}


def test_result_is_immutable() -> None:
    assert isinstance(decode(_snapshot(31)), frozenset)


def test_function_labels() -> None:
    assert [function.label for function in AppFunction] == [
        "Call",
        "Messaging",
        "Video",
        "Keyboard input",
        "Long text",
    ]
