import pytest


def assert_close(z, real, imaginary, abs_tol=1e-12):
    """Component-wise approximate comparison of a Complex against two floats."""
    assert z.real == pytest.approx(real, abs=abs_tol)
    assert z.imaginary == pytest.approx(imaginary, abs=abs_tol)


@pytest.fixture
def close():
    return assert_close
