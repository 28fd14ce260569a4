import numpy as np
import pytest

from pairing import (
    COST_FAMILIES,
    generate_costs,
    generate_identity_like_costs,
    generate_worst_case_costs,
)


@pytest.mark.parametrize("family", sorted(COST_FAMILIES))
@pytest.mark.parametrize("shape", [5, (3, 7), (7, 3)])
def test_shape_and_sign(family, shape):
    C = generate_costs(family, shape, seed=0)
    expected = (shape, shape) if isinstance(shape, int) else shape
    assert C.shape == expected
    assert C.dtype == np.float64
    assert C.min() >= 0.0
    assert np.all(np.isfinite(C))


@pytest.mark.parametrize("family", ["uniform", "integer", "tie", "clustered"])
def test_seeded_families_are_reproducible(family):
    np.testing.assert_array_equal(generate_costs(family, 6, seed=5), generate_costs(family, 6, seed=5))
    assert not np.array_equal(generate_costs(family, 6, seed=5), generate_costs(family, 6, seed=6))


def test_identity_like_rectangular():
    C = generate_identity_like_costs((2, 3))
    np.testing.assert_array_equal(C, [[0.0, 1.0, 1.0], [1.0, 0.0, 1.0]])


def test_worst_case_anti_diagonal():
    C = generate_worst_case_costs(3)
    np.testing.assert_array_equal(np.diag(np.fliplr(C)), [1.0, 1.0, 1.0])


def test_unknown_family():
    with pytest.raises(ValueError):
        generate_costs("nope", 3)
