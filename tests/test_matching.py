import itertools

import numpy as np

from pairing import UNMATCHED, Matching, max_matching, min_vertex_cover


def _brute_force_matching_size(mask):
    n_rows, n_cols = mask.shape
    best = 0
    for k in range(min(n_rows, n_cols), 0, -1):
        for rows in itertools.combinations(range(n_rows), k):
            for cols in itertools.permutations(range(n_cols), k):
                if all(mask[r, c] for r, c in zip(rows, cols)):
                    return k
    return best


def test_augmenting_path_reassigns_earlier_row():
    mask = np.array([[True, True],
                     [True, False]])
    matching = max_matching(mask)
    assert matching.size == 2
    np.testing.assert_array_equal(matching.row_to_col, [1, 0])
    np.testing.assert_array_equal(matching.col_to_row, [1, 0])


def test_deterministic_ascending_order():
    mask = np.array([[True, True, False],
                     [True, False, False],
                     [True, False, False]])
    matching = max_matching(mask)
    np.testing.assert_array_equal(matching.row_to_col, [1, 0, UNMATCHED])
    np.testing.assert_array_equal(matching.col_to_row, [1, 0, UNMATCHED])


def test_empty_mask():
    matching = max_matching(np.zeros((3, 3), dtype=bool))
    assert matching.size == 0
    assert list(matching.pairs()) == []


def test_long_augmenting_chain():
    # Row i can use columns i and i+1; processing in order forces a full chain
    # of reassignments when the last row only accepts column 0.
    n = 50
    mask = np.zeros((n, n), dtype=bool)
    for i in range(n - 1):
        mask[i, i] = True
        mask[i, i + 1] = True
    mask[n - 1, 0] = True
    matching = max_matching(mask)
    assert matching.size == n
    assert matching.is_consistent()


def test_matching_matches_brute_force(rng):
    for _ in range(25):
        mask = rng.random((4, 5)) < 0.35
        matching = max_matching(mask)
        assert matching.is_consistent()
        for i, j in matching.pairs():
            assert mask[i, j]
        assert matching.size == _brute_force_matching_size(mask)


def test_initial_matching_is_extended_not_modified():
    mask = np.array([[True, True],
                     [True, False]])
    initial = Matching.empty(2, 2)
    initial.row_to_col[0] = 0
    initial.col_to_row[0] = 0

    matching = max_matching(mask, initial=initial)
    assert matching.size == 2
    assert initial.size == 1
    # column 0 stays matched through the augmentation
    assert matching.col_to_row[0] != UNMATCHED


def test_cover_textbook_example():
    mask = np.array([[True, True, False],
                     [True, False, False],
                     [True, False, False]])
    matching = max_matching(mask)
    cover = min_vertex_cover(mask, matching)
    np.testing.assert_array_equal(cover.rows, [True, False, False])
    np.testing.assert_array_equal(cover.cols, [True, False, False])
    assert cover.size == matching.size == 2
    assert cover.covers(mask)


def test_konig_property_on_random_masks(rng):
    for _ in range(40):
        n = int(rng.integers(1, 9))
        mask = rng.random((n, n)) < rng.uniform(0.1, 0.6)
        matching = max_matching(mask)
        cover = min_vertex_cover(mask, matching)
        assert cover.covers(mask)
        assert cover.size == matching.size


def test_perfect_matching_covers_all_rows():
    mask = np.eye(4, dtype=bool)
    matching = max_matching(mask)
    cover = min_vertex_cover(mask, matching)
    assert cover.rows.all()
    assert not cover.cols.any()
