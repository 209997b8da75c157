import warnings

import numpy as np
import pytest

import cachematrix
from cachematrix._internal import solvers

METHODS = ("inv", "solve", "lu", "qr")


def test_registry_lists_every_method():
    assert cachematrix.available_methods() == METHODS


@pytest.mark.parametrize("method", METHODS)
def test_inverts_known_matrix(method):
    a = np.array([[4.0, 7.0], [2.0, 6.0]])
    expected = np.array([[0.6, -0.7], [-0.2, 0.4]])
    np.testing.assert_allclose(cachematrix.invert_matrix(a, method), expected, atol=1e-12)


@pytest.mark.parametrize("method", METHODS)
def test_accepts_integer_nested_lists(method):
    np.testing.assert_allclose(
        cachematrix.invert_matrix([[2, 0], [0, 2]], method), [[0.5, 0.0], [0.0, 0.5]]
    )


@pytest.mark.parametrize("method", METHODS)
def test_singular_matrix_raises(method):
    with pytest.raises(np.linalg.LinAlgError):
        cachematrix.invert_matrix([[1.0, 2.0], [0.0, 0.0]], method)


@pytest.mark.parametrize("method", METHODS)
def test_zero_scalar_matrix_raises(method):
    with pytest.raises(np.linalg.LinAlgError):
        cachematrix.invert_matrix([[0.0]], method)


@pytest.mark.parametrize("method", METHODS)
def test_non_square_matrix_raises(method):
    with pytest.raises(np.linalg.LinAlgError):
        cachematrix.invert_matrix(np.ones((2, 3)), method)


def test_complex_matrix_qr():
    a = np.array([[1 + 1j, 2.0], [0.5j, 3.0]])
    np.testing.assert_allclose(solvers.invert_qr(a) @ a, np.eye(2), atol=1e-12)


def test_unknown_method_raises_value_error():
    with pytest.raises(ValueError, match="Unknown inversion method"):
        cachematrix.invert_matrix([[1.0]], "svd")


def test_default_method_is_used_when_none_given():
    with cachematrix.temporary_inverse_method("lu"):
        np.testing.assert_allclose(cachematrix.invert_matrix([[4.0]]), [[0.25]])


@pytest.mark.parametrize("method", METHODS)
def test_badly_scaled_invertible_matrix(method):
    a = np.diag([1e20, 1e-5])
    np.testing.assert_allclose(
        cachematrix.invert_matrix(a, method), np.diag([1e-20, 1e5]), rtol=1e-12
    )


def test_lu_passes_through_non_singular_scipy_warnings(monkeypatch):
    import scipy.linalg

    real_lu_factor = scipy.linalg.lu_factor

    def _noisy_lu_factor(a, *args, **kwargs):
        warnings.warn("ill-conditioned matrix", scipy.linalg.LinAlgWarning)
        return real_lu_factor(a, *args, **kwargs)

    monkeypatch.setattr(scipy.linalg, "lu_factor", _noisy_lu_factor)
    with pytest.warns(scipy.linalg.LinAlgWarning, match="ill-conditioned"):
        inverse = solvers.invert_lu([[4.0]])
    np.testing.assert_allclose(inverse, [[0.25]])


def test_lu_singular_matrix_does_not_leak_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with pytest.raises(np.linalg.LinAlgError):
            solvers.invert_lu([[1.0, 2.0], [0.0, 0.0]])
