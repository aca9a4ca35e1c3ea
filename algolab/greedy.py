"""Greedy algorithms: job scheduling, activity selection and Huffman coding."""

from __future__ import annotations

import heapq
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from itertools import accumulate, count
from typing import Optional


@dataclass(frozen=True)
class Job:
    """A job with an identifier and a processing time."""

    id: int
    time: int


@dataclass(frozen=True)
class Activity:
    """An activity occupying the interval [start, finish)."""

    id: int
    start: int
    finish: int


@dataclass(frozen=True)
class Schedule:
    """Jobs in execution order and their mean completion time."""

    order: list[Job]
    average_completion_time: float


def schedule_jobs(jobs: Iterable[Job]) -> Schedule:
    """Run shortest jobs first, which minimises the mean completion time."""
    order = sorted(jobs, key=lambda job: job.time)
    if not order:
        raise ValueError("schedule_jobs needs at least one job")
    total = sum(accumulate(job.time for job in order))
    return Schedule(order, total / len(order))


def select_activities(activities: Iterable[Activity]) -> list[Activity]:
    """Pick a largest set of compatible activities by earliest finish time."""
    chosen: list[Activity] = []
    for activity in sorted(activities, key=lambda a: a.finish):
        if not chosen or activity.start >= chosen[-1].finish:
            chosen.append(activity)
    return chosen


@dataclass
class _Node:
    symbol: Optional[str]
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def huffman_codes(frequencies: Mapping[str, int]) -> dict[str, str]:
    """Build a Huffman code for the given symbol frequencies."""
    if not frequencies:
        return {}
    tiebreak = count()
    queue = [
        (freq, next(tiebreak), _Node(symbol))
        for symbol, freq in sorted(frequencies.items())
    ]
    heapq.heapify(queue)
    while len(queue) > 1:
        left_freq, _, left = heapq.heappop(queue)
        right_freq, _, right = heapq.heappop(queue)
        merged = _Node(None, left, right)
        heapq.heappush(queue, (left_freq + right_freq, next(tiebreak), merged))

    codes: dict[str, str] = {}

    def walk(node: Optional[_Node], code: str) -> None:
        if node is None:
            return
        if node.left is None and node.right is None:
            codes[node.symbol] = code
        walk(node.left, code + "0")
        walk(node.right, code + "1")

    walk(queue[0][2], "")
    return dict(sorted(codes.items()))


def main(argv: list[str] | None = None) -> int:
    """Run the three greedy algorithms on sample data."""
    out = sys.stdout
    jobs = [Job(1, 15), Job(2, 8), Job(3, 3), Job(4, 10)]
    schedule = schedule_jobs(jobs)
    order = "".join(f"J{job.id} " for job in schedule.order)
    print(f"Job sirasi: {order}", file=out)
    print(f"Ortalama tamamlama suresi: {schedule.average_completion_time:g}", file=out)
    print("------------------", file=out)

    activities = [
        Activity(1, 1, 4), Activity(2, 3, 5), Activity(3, 0, 6),
        Activity(4, 5, 7), Activity(5, 3, 8), Activity(6, 5, 9),
        Activity(7, 6, 10), Activity(8, 8, 11), Activity(9, 8, 12),
        Activity(10, 2, 13), Activity(11, 12, 14),
    ]
    picked = "".join(f"a{a.id} " for a in select_activities(activities))
    print(f"Secilen aktiviteler: {picked}", file=out)
    print("------------------", file=out)

    frequencies = {"a": 5, "b": 9, "c": 12, "d": 13, "e": 16, "f": 45}
    print("Huffman Kodlari:", file=out)
    for symbol, code in huffman_codes(frequencies).items():
        print(f"{symbol} : {code}", file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())