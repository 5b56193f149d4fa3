import logging

import matplotlib
matplotlib.use("Agg")

import pytest

from starpad.model.parameters import BatchParameters
from starpad.model.profile import RadialProfile


@pytest.fixture
def profile() -> RadialProfile:
    """R=10, h=1, rf=0.3, hf=0.4 -> s1=11, s2=12.2, s3=14."""
    return RadialProfile(radius=10.0, height=1.0, overlap_fraction=0.3, recovery_fraction=0.4)


@pytest.fixture
def batch_params() -> BatchParameters:
    """Header that derives N=13, K=10, rf=0.3 for R=10."""
    return BatchParameters(
        resolution=1.0,
        height=1.0,
        max_jag_chord=5.0,
        min_radius=5.0,
        max_overlap_radius=3.0,
        recovery_fraction=0.4,
    )


@pytest.fixture
def param_file(tmp_path):
    path = tmp_path / "params.txt"
    path.write_text("1.0 1.0 5.0 5.0 3.0 0.4\n10.0\n15.0\n")
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("starpad")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
