from math import pi

import numpy as np
import pytest

from starpad.errors import InvalidParameter, InconsistentSampling
from starpad.model import sampler
from starpad.model.profile import RadialProfile
from starpad.model.sampler import Ladder, build_ladder, ladder_length, sample_spacing


def test_ladder_size(profile):
    ladder = build_ladder(profile, sample_count=10, jag_count=13)
    # floor(10 + 2 pi 7 / (0.3 * 26)) = floor(15.64)
    assert ladder.kappa == 15
    assert len(ladder) == 15
    assert ladder.profile_count == 10
    assert ladder.tail_count == 5


def test_profile_samples(profile):
    ladder = build_ladder(profile, sample_count=10, jag_count=13)
    ds = sample_spacing(profile, 10)
    assert ds == pytest.approx(0.3)

    expected_s = profile.s1 + ds * np.arange(10)
    np.testing.assert_allclose(ladder.s[:10], expected_s)
    np.testing.assert_allclose(ladder.c[:10], profile.circumference(expected_s))
    assert ladder.c[0] == pytest.approx(2 * pi * profile.s1)


def test_s_monotonic(profile):
    ladder = build_ladder(profile, sample_count=10, jag_count=13)
    assert np.all(np.diff(ladder.s[:ladder.profile_count]) > 0.0)
    assert np.all(np.diff(ladder.s) >= 0.0)


def test_closure_tail(profile):
    ladder = build_ladder(profile, sample_count=10, jag_count=13)
    tail_s = ladder.s[10:]
    tail_c = ladder.c[10:]
    step = 0.3 * 2 * 13

    np.testing.assert_allclose(tail_s, profile.s3)
    assert tail_c[0] == pytest.approx(profile.tip_circumference)
    np.testing.assert_allclose(np.diff(tail_c), -step)
    assert 0.0 < tail_c[-1] < 2 * step


def test_samples_property(profile):
    ladder = build_ladder(profile, sample_count=4, jag_count=20)
    pairs = ladder.samples
    assert len(pairs) == len(ladder)
    assert pairs[0] == (pytest.approx(profile.s1), pytest.approx(2 * pi * profile.s1))


@pytest.mark.parametrize("K, N", [(1, 1), (10, 13), (50, 7), (200, 40)])
def test_kappa_never_below_k(profile, K, N):
    assert ladder_length(profile, K, N) >= K


def test_full_overlap_has_no_tail():
    prof = RadialProfile(radius=10.0, height=1.0, overlap_fraction=1.0, recovery_fraction=0.4)
    ladder = build_ladder(prof, sample_count=10, jag_count=13)
    assert ladder.kappa == 10
    assert ladder.tail_count == 0


@pytest.mark.parametrize("K, N", [(0, 13), (-3, 13), (10, 0), (10, -1)])
def test_non_positive_counts_rejected(profile, K, N):
    with pytest.raises(InvalidParameter):
        build_ladder(profile, sample_count=K, jag_count=N)


def test_kappa_below_k_is_inconsistent(profile, monkeypatch):
    monkeypatch.setattr(sampler, "ladder_length", lambda prof, K, N: K - 1)
    with pytest.raises(InconsistentSampling):
        build_ladder(profile, sample_count=10, jag_count=13)


def test_ladder_columns_must_match():
    with pytest.raises(InconsistentSampling):
        Ladder(s=np.zeros(3), c=np.zeros(4), profile_count=3)


def test_non_finite_tail_is_inconsistent():
    # s3 overflows to inf, so c(s3) / ds is not a number
    prof = RadialProfile(radius=1.5e308, height=0.0, overlap_fraction=0.3, recovery_fraction=0.4)
    with np.errstate(all="ignore"), pytest.raises(InconsistentSampling):
        ladder_length(prof, 10, 13)
