"""Identifier Arithmetic — tests for next_id and id range checks."""

import pytest

from taskboard.core.domain_types import MAX_ID, Collection
from taskboard.core.errors import IdSpaceExhaustedError, ValidationError
from taskboard.core.id_allocation import check_id_in_range, next_id


def test_first_id_is_one():
    assert next_id(0, Collection.MEMBERS) == 1


def test_next_id_is_strictly_greater():
    assert next_id(7, Collection.TASKS) == 8


def test_last_id_in_range_is_allocatable():
    assert next_id(MAX_ID - 1, Collection.TASKS) == MAX_ID


def test_allocation_past_max_id_raises():
    with pytest.raises(IdSpaceExhaustedError) as exc_info:
        next_id(MAX_ID, Collection.MEMBERS)
    assert exc_info.value.collection == "members"
    assert exc_info.value.http_status == 507
    assert not exc_info.value.recoverable


@pytest.mark.parametrize("entry_id", [1, 42, MAX_ID])
def test_ids_in_range_pass(entry_id):
    assert check_id_in_range(entry_id) is None


@pytest.mark.parametrize("entry_id", [0, -1, MAX_ID + 1])
def test_ids_out_of_range_fail(entry_id):
    error = check_id_in_range(entry_id)
    assert isinstance(error, ValidationError)
    assert error.field == "id"
