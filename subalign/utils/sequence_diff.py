"""Longest-common-subsequence diff over index-addressed sequences.

Implements Myers' O((N+M)·D) algorithm with the linear-space middle-snake
bisection, so long transcripts (tens of thousands of words) diff without
quadratic memory. Elements are compared through an `is_common(i, j)` callback,
which lets callers plug in locale-aware equality.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class CommonRun:
    """`length` consecutive elements with a[a_index + k] ~ b[b_index + k]."""

    a_index: int
    b_index: int
    length: int


IsCommonFn = Callable[[int, int], bool]
CommonRunsFn = Callable[[int, int, IsCommonFn], list[CommonRun]]


def find_common_runs(len_a: int, len_b: int, is_common: IsCommonFn) -> list[CommonRun]:
    """Return maximal common runs in increasing order of both indices."""
    if len_a < 0 or len_b < 0:
        raise ValueError("sequence lengths must be >= 0")
    pieces: list[tuple[int, int, int]] = []
    _diff(0, len_a, 0, len_b, is_common, pieces)

    runs: list[CommonRun] = []
    for a_index, b_index, length in pieces:
        if length <= 0:
            continue
        if runs:
            prev = runs[-1]
            if prev.a_index + prev.length == a_index and prev.b_index + prev.length == b_index:
                runs[-1] = CommonRun(prev.a_index, prev.b_index, prev.length + length)
                continue
        runs.append(CommonRun(a_index, b_index, length))
    return runs


def _diff(
    a_lo: int,
    a_hi: int,
    b_lo: int,
    b_hi: int,
    is_common: IsCommonFn,
    out: list[tuple[int, int, int]],
) -> None:
    prefix = 0
    while a_lo + prefix < a_hi and b_lo + prefix < b_hi and is_common(a_lo + prefix, b_lo + prefix):
        prefix += 1
    if prefix:
        out.append((a_lo, b_lo, prefix))
        a_lo += prefix
        b_lo += prefix

    suffix = 0
    while (
        a_hi - suffix > a_lo
        and b_hi - suffix > b_lo
        and is_common(a_hi - suffix - 1, b_hi - suffix - 1)
    ):
        suffix += 1
    a_hi -= suffix
    b_hi -= suffix

    n = a_hi - a_lo
    m = b_hi - b_lo
    if n == 1 and m > 0:
        for j in range(b_lo, b_hi):
            if is_common(a_lo, j):
                out.append((a_lo, j, 1))
                break
    elif m == 1 and n > 0:
        for i in range(a_lo, a_hi):
            if is_common(i, b_lo):
                out.append((i, b_lo, 1))
                break
    elif n > 0 and m > 0:
        split = _bisect(a_lo, n, b_lo, m, is_common)
        if split is not None:
            x, y = split
            _diff(a_lo, a_lo + x, b_lo, b_lo + y, is_common, out)
            _diff(a_lo + x, a_hi, b_lo + y, b_hi, is_common, out)

    if suffix:
        out.append((a_hi, b_hi, suffix))


def _bisect(
    a_lo: int,
    n: int,
    b_lo: int,
    m: int,
    is_common: IsCommonFn,
) -> tuple[int, int] | None:
    """Find the middle snake of a[a_lo:a_lo+n] vs b[b_lo:b_lo+m].

    Returns the split point (x, y) relative to the range starts, or None when
    the ranges share no element. Requires n >= 2 and m >= 2.
    """
    max_d = (n + m + 1) // 2
    v_offset = max_d
    v_length = 2 * max_d
    v1 = [-1] * v_length
    v1[v_offset + 1] = 0
    v2 = list(v1)
    delta = n - m
    # With an odd delta the forward pass detects the overlap, else the reverse pass.
    front = delta % 2 != 0
    k1start = k1end = k2start = k2end = 0

    for d in range(max_d):
        for k1 in range(-d + k1start, d + 1 - k1end, 2):
            k1_offset = v_offset + k1
            if k1 == -d or (k1 != d and v1[k1_offset - 1] < v1[k1_offset + 1]):
                x1 = v1[k1_offset + 1]
            else:
                x1 = v1[k1_offset - 1] + 1
            y1 = x1 - k1
            while x1 < n and y1 < m and is_common(a_lo + x1, b_lo + y1):
                x1 += 1
                y1 += 1
            v1[k1_offset] = x1
            if x1 > n:
                k1end += 2
            elif y1 > m:
                k1start += 2
            elif front:
                k2_offset = v_offset + delta - k1
                if 0 <= k2_offset < v_length and v2[k2_offset] != -1:
                    if x1 >= n - v2[k2_offset]:
                        return x1, y1

        for k2 in range(-d + k2start, d + 1 - k2end, 2):
            k2_offset = v_offset + k2
            if k2 == -d or (k2 != d and v2[k2_offset - 1] < v2[k2_offset + 1]):
                x2 = v2[k2_offset + 1]
            else:
                x2 = v2[k2_offset - 1] + 1
            y2 = x2 - k2
            while x2 < n and y2 < m and is_common(a_lo + n - x2 - 1, b_lo + m - y2 - 1):
                x2 += 1
                y2 += 1
            v2[k2_offset] = x2
            if x2 > n:
                k2end += 2
            elif y2 > m:
                k2start += 2
            elif not front:
                k1_offset = v_offset + delta - k2
                if 0 <= k1_offset < v_length and v1[k1_offset] != -1:
                    x1 = v1[k1_offset]
                    y1 = v_offset + x1 - k1_offset
                    if x1 >= n - x2:
                        return x1, y1

    return None
