import pytest

from rustdrill.drills.concurrency import offset_sums, sum_with_offset


def test_offset_sums_cover_all_numbers():
    numbers = list(range(100))
    sums = offset_sums(numbers)
    assert len(sums) == 8
    assert sum(sums) == sum(numbers)


def test_offset_sums_match_single_offset():
    numbers = list(range(100))
    sums = offset_sums(numbers, 8)
    for offset in range(8):
        assert sums[offset] == sum_with_offset(numbers, offset, 8)


def test_single_worker_sums_everything():
    numbers = [3, 5, 7, 11]
    assert offset_sums(numbers, 1) == [sum(numbers)]


def test_sum_with_offset_selects_by_value():
    assert sum_with_offset([1, 9, 2, 17], 1) == 1 + 9 + 17
    assert sum_with_offset([2, 3, 4], 7) == 0


def test_generator_input_is_consumed_once():
    sums = offset_sums((n for n in range(16)), 4)
    assert sum(sums) == sum(range(16))


def test_invalid_worker_count():
    with pytest.raises(ValueError):
        offset_sums([1, 2, 3], 0)