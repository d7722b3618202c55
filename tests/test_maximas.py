import numpy as np
import pytest

from iptskit.maximas import find_maxima


def _neighbours(arr, x, y):
    rows, cols = arr.shape
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if (dy, dx) == (0, 0):
                continue
            ny, nx = y + dy, x + dx
            if 0 <= ny < rows and 0 <= nx < cols:
                yield arr[ny, nx]


def test_single_peak_is_found_at_its_position():
    data = np.zeros((5, 7))
    data[2, 4] = 10.0
    assert find_maxima(data, 0.5) == [(4, 2)]


def test_nothing_above_threshold_returns_empty():
    data = np.full((4, 4), 3.0)
    assert find_maxima(data, 3.0) == []


def test_peak_at_threshold_is_excluded():
    data = np.zeros((3, 3))
    data[1, 1] = 2.0
    assert find_maxima(data, 2.0) == []
    assert find_maxima(data, 1.9) == [(1, 1)]


def test_horizontal_plateau_reported_once():
    data = np.zeros((3, 4))
    data[1, 1] = 5.0
    data[1, 2] = 5.0
    result = find_maxima(data, 1.0)
    assert len(result) == 1
    assert result[0] in [(1, 1), (2, 1)]


def test_square_plateau_reported_once():
    data = np.zeros((6, 6))
    data[2:4, 2:4] = 8.0
    assert len(find_maxima(data, 1.0)) == 1


def test_constant_field_reports_single_point():
    data = np.full((5, 5), 4.0)
    assert len(find_maxima(data, 1.0)) == 1


def test_results_are_in_row_major_order():
    data = np.zeros((6, 6))
    data[4, 1] = 3.0
    data[1, 4] = 3.0
    data[1, 1] = 3.0
    result = find_maxima(data, 0.0)
    assert result == sorted(result, key=lambda p: (p[1], p[0]))
    assert set(result) == {(1, 1), (4, 1), (1, 4)}


def test_reported_points_dominate_their_neighbours():
    rng = np.random.default_rng(1234)
    data = rng.integers(0, 20, size=(12, 9)).astype(float)
    threshold = 5.0
    result = find_maxima(data, threshold)
    assert result
    for x, y in result:
        value = data[y, x]
        assert value > threshold
        assert all(n <= value for n in _neighbours(data, x, y))


def test_distinct_strict_maxima_all_reported():
    rng = np.random.default_rng(99)
    data = rng.random((10, 10))
    expected = {
        (x, y)
        for y in range(10)
        for x in range(10)
        if all(n < data[y, x] for n in _neighbours(data, x, y))
    }
    assert set(find_maxima(data, -1.0)) == expected


def test_single_row_and_single_cell():
    assert find_maxima(np.array([[1.0, 3.0, 2.0]]), 0.0) == [(1, 0)]
    assert find_maxima(np.array([[7.0]]), 0.0) == [(0, 0)]


def test_accepts_nested_lists():
    assert find_maxima([[0, 0, 0], [0, 9, 0], [0, 0, 0]], 0) == [(1, 1)]


@pytest.mark.parametrize("bad", [np.zeros(5), np.zeros((2, 2, 2))])
def test_non_2d_input_raises(bad):
    with pytest.raises(ValueError):
        find_maxima(bad, 0.0)