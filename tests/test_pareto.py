import numpy as np

from hvengine.pareto import fast_non_dominated_sort, nondominated, nondominated_mask, pareto_filter


def test_fast_non_dominated_sort_ranks():
    F = np.array([[1.0, 2.0], [2.0, 1.0], [2.0, 2.0], [3.0, 3.0]])
    fronts, rank = fast_non_dominated_sort(F)
    assert fronts == [[0, 1], [2], [3]]
    assert rank.tolist() == [0, 0, 1, 2]


def test_fast_non_dominated_sort_empty():
    fronts, rank = fast_non_dominated_sort(np.empty((0, 2)))
    assert fronts == []
    assert rank.size == 0


def test_nondominated_mask_drops_repeats_and_dominated():
    F = np.array([[1.0, 2.0], [1.0, 2.0], [2.0, 1.0], [2.0, 2.0], [1.0, 3.0]])
    assert nondominated_mask(F).tolist() == [True, False, True, False, False]
    np.testing.assert_array_equal(nondominated(F), [[1.0, 2.0], [2.0, 1.0]])


def test_pareto_filter_returns_indices():
    F = np.array([[3.0, 3.0], [1.0, 2.0], [2.0, 1.0]])
    front, idx = pareto_filter(F, return_indices=True)
    assert idx.tolist() == [1, 2]
    np.testing.assert_array_equal(front, F[[1, 2]])


def test_pareto_filter_none():
    assert pareto_filter(None) is None
