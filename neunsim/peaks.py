"""Peak detection by prominence."""

from __future__ import annotations

from typing import Sequence


def detect_peaks(voltages: Sequence[float], tolerance: float) -> list[int]:
    """Return indices of local maxima whose prominence exceeds ``tolerance`` times their height.

    A peak's prominence is its value minus the higher of the minima found
    between it and its neighbouring peaks (or the edges of the trace).
    """
    if not voltages:
        raise ValueError("cannot detect peaks in an empty trace")

    running_min = voltages[0]
    left_mins: list[float] = []
    right_mins: list[float] = []
    peaks: list[int] = []

    triples = zip(voltages, voltages[1:], voltages[2:])
    for index, (prev, curr, nxt) in enumerate(triples, start=1):
        running_min = min(running_min, curr)
        if curr > prev and curr > nxt:
            left_mins.append(running_min)
            if peaks:
                right_mins.append(running_min)
            peaks.append(index)
            running_min = curr
    right_mins.append(running_min)

    return [
        peak
        for peak, left, right in zip(peaks, left_mins, right_mins)
        if voltages[peak] - max(left, right) > tolerance * abs(voltages[peak])
    ]