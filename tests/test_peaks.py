import pytest

from neunsim.peaks import detect_peaks


def test_single_prominent_peak():
    assert detect_peaks([0.0, 5.0, 0.0, 0.0], 0.5) == [1]


def test_two_peaks():
    trace = [0.0, 10.0, 0.0, 0.0, 0.0, 10.0, 0.0, 0.0]
    assert detect_peaks(trace, 0.5) == [1, 5]


def test_monotonic_trace_has_no_peaks():
    assert detect_peaks([1.0, 2.0, 3.0, 4.0, 5.0], 0.0) == []


def test_high_tolerance_filters_everything():
    assert detect_peaks([0.0, 5.0, 0.0, 0.0], 2.0) == []


def test_short_traces():
    assert detect_peaks([1.0], 0.1) == []
    assert detect_peaks([1.0, 2.0], 0.1) == []


def test_empty_trace_raises():
    with pytest.raises(ValueError):
        detect_peaks([], 0.1)


def test_results_are_local_maxima():
    trace = [0.0, 3.0, 1.0, 4.0, -2.0, 6.0, 5.0, 7.0, 0.0, 0.0]
    peaks = detect_peaks(trace, 0.1)
    assert peaks
    for p in peaks:
        assert trace[p] > trace[p - 1] and trace[p] > trace[p + 1]