import numpy as np
import pytest


@pytest.fixture
def textbook_3x3():
    return np.array([[4.0, 1.0, 3.0],
                     [2.0, 0.0, 5.0],
                     [3.0, 2.0, 2.0]])


@pytest.fixture
def textbook_4x4():
    return np.array([[82.0, 83.0, 69.0, 92.0],
                     [77.0, 37.0, 49.0, 92.0],
                     [11.0, 69.0, 5.0, 86.0],
                     [8.0, 9.0, 98.0, 23.0]])


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
