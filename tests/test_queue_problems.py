from collections import deque

import pytest

from dsaworks.queue_problems import first_non_repeating, reverse_first_k, reverse_queue


def test_reverse_queue_source_example():
    assert list(reverse_queue(deque([1, 2, 3, 4]))) == [4, 3, 2, 1]


def test_reverse_queue_leaves_input_untouched():
    original = deque([5, 6, 7])
    reversed_queue = reverse_queue(original)
    assert list(original) == [5, 6, 7]
    assert list(reverse_queue(reversed_queue)) == list(original)


def test_reverse_queue_empty():
    assert len(reverse_queue([])) == 0


def test_first_non_repeating_source_example():
    assert first_non_repeating("aabbcd") == "a#b#cc"


def test_first_non_repeating_single_character():
    assert first_non_repeating("x") == "x"


def test_first_non_repeating_empty():
    assert first_non_repeating("") == ""


@pytest.mark.parametrize("text", ["abcabc", "zzzz", "hello world", "aab"])
def test_first_non_repeating_invariants(text):
    result = first_non_repeating(text)
    assert len(result) == len(text)
    for index, char in enumerate(result):
        prefix = text[: index + 1]
        if char == "#":
            assert all(prefix.count(c) > 1 for c in prefix)
        else:
            assert prefix.count(char) == 1


def test_first_non_repeating_all_repeated():
    assert first_non_repeating("zzzz")[1:] == "###"


def test_reverse_first_k_source_example():
    assert list(reverse_first_k(deque([1, 2, 3, 4, 5]), 3)) == [3, 2, 1, 5, 4]


def test_reverse_first_k_whole_queue_matches_full_reverse():
    values = [9, 8, 7, 6]
    assert list(reverse_first_k(values, len(values))) == list(reverse_queue(values))


def test_reverse_first_k_zero_reverses_everything():
    values = [1, 2, 3]
    assert list(reverse_first_k(values, 0)) == list(reverse_queue(values))


def test_reverse_first_k_keeps_input_and_values():
    original = deque([4, 1, 3, 2])
    result = reverse_first_k(original, 2)
    assert list(original) == [4, 1, 3, 2]
    assert sorted(result) == sorted(original)


@pytest.mark.parametrize("k", [-1, 6])
def test_reverse_first_k_out_of_range_raises(k):
    with pytest.raises(ValueError):
        reverse_first_k([1, 2, 3, 4, 5], k)