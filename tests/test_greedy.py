from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.greedy import (
    Activity,
    Job,
    huffman_codes,
    main,
    schedule_jobs,
    select_activities,
)

SOURCE_JOBS = [Job(1, 15), Job(2, 8), Job(3, 3), Job(4, 10)]
SOURCE_ACTIVITIES = [
    Activity(1, 1, 4), Activity(2, 3, 5), Activity(3, 0, 6),
    Activity(4, 5, 7), Activity(5, 3, 8), Activity(6, 5, 9),
    Activity(7, 6, 10), Activity(8, 8, 11), Activity(9, 8, 12),
    Activity(10, 2, 13), Activity(11, 12, 14),
]
SOURCE_FREQUENCIES = {"a": 5, "b": 9, "c": 12, "d": 13, "e": 16, "f": 45}


def test_schedule_orders_by_time():
    schedule = schedule_jobs(SOURCE_JOBS)
    times = [job.time for job in schedule.order]
    assert times == sorted(times)
    assert sorted(schedule.order, key=lambda j: j.id) == SOURCE_JOBS


def test_schedule_source_average():
    assert schedule_jobs(SOURCE_JOBS).average_completion_time == pytest.approx(17.75)


def test_schedule_single_job():
    assert schedule_jobs([Job(9, 12)]).average_completion_time == 12


def test_schedule_empty_raises():
    with pytest.raises(ValueError):
        schedule_jobs([])


def test_select_source_activities():
    assert [a.id for a in select_activities(SOURCE_ACTIVITIES)] == [1, 4, 8, 11]


@given(
    st.lists(
        st.tuples(st.integers(0, 50), st.integers(1, 20)).map(
            lambda p: Activity(0, p[0], p[0] + p[1])
        )
    )
)
def test_selection_is_compatible(activities):
    chosen = select_activities(activities)
    for before, after in zip(chosen, chosen[1:]):
        assert after.start >= before.finish
    if activities:
        assert chosen[0].finish == min(a.finish for a in activities)
    else:
        assert chosen == []


def test_huffman_source_codes():
    assert huffman_codes(SOURCE_FREQUENCIES) == {
        "a": "1100",
        "b": "1101",
        "c": "100",
        "d": "101",
        "e": "111",
        "f": "0",
    }


def test_huffman_single_and_empty():
    assert huffman_codes({"x": 3}) == {"x": ""}
    assert huffman_codes({}) == {}


@given(
    st.dictionaries(
        st.characters(min_codepoint=97, max_codepoint=122),
        st.integers(1, 100),
        min_size=2,
    )
)
def test_huffman_prefix_free_and_complete(frequencies):
    codes = huffman_codes(frequencies)
    assert set(codes) == set(frequencies)
    words = list(codes.values())
    for a in words:
        for b in words:
            if a is not b:
                assert not b.startswith(a)
    assert sum(Fraction(1, 2 ** len(w)) for w in words) == 1


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("Job sirasi: J3 J2 J4 J1 ")
    assert "Secilen aktiviteler: a1 a4 a8 a11 " in out
    assert "Huffman Kodlari:\n" in out
    assert "f : 0\n" in out