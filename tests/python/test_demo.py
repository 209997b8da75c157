import io

import numpy as np
import pytest

from cachematrix import demo


def test_walkthrough_prints_three_inverses(capsys):
    assert demo.main(["[[2,0],[0,2]]"]) == demo.EXIT_OK
    out = capsys.readouterr().out
    assert out.count("0.5") == 6
    assert "hits=1 misses=2 computations=2" in out


def test_run_returns_matrix_with_populated_cache():
    buf = io.StringIO()
    m = demo.run([[4, 7], [2, 6]], method="lu", out=buf)
    np.testing.assert_allclose(m.get_inverse(), [[0.6, -0.7], [-0.2, 0.4]], atol=1e-12)
    assert m.epoch == 1


def test_empty_matrix_exit_code(capsys):
    assert demo.main(["[]"]) == demo.EXIT_INVALID_MATRIX
    assert "empty matrix" in capsys.readouterr().err


def test_singular_matrix_exit_code(capsys):
    assert demo.main(["[[1,2],[2,4]]"]) == demo.EXIT_INVERSION_FAILED
    assert "inversion failed" in capsys.readouterr().err


def test_non_square_matrix_exit_code():
    with pytest.warns(UserWarning):
        assert demo.main(["[[1,2,3],[4,5,6]]"]) == demo.EXIT_INVERSION_FAILED


def test_bad_json_exit_code(capsys):
    assert demo.main(["[[1,2"]) == demo.EXIT_USAGE
    assert "not valid JSON" in capsys.readouterr().err


def test_missing_argument_exit_code():
    assert demo.main([]) == demo.EXIT_USAGE


def test_unknown_method_is_usage_error():
    assert demo.main(["[[1]]", "--method", "svd"]) == demo.EXIT_USAGE
