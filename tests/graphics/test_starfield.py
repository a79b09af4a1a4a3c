import numpy as np

from duskwater.config import StarfieldSettings
from duskwater.graphics.starfield import Starfield, generate_star_positions


def test_positions_fill_the_upper_half_cube():
    rng = np.random.default_rng(3)
    pts = generate_star_positions(5000, 15000.0, rng)

    assert pts.shape == (5000, 3)
    assert pts.dtype == np.float32

    half = 7500.0
    assert np.all(pts[:, 0] >= -half) and np.all(pts[:, 0] < half)
    assert np.all(pts[:, 2] >= -half) and np.all(pts[:, 2] < half)
    assert np.all(pts[:, 1] >= 0.0) and np.all(pts[:, 1] < half)


def test_seed_makes_the_sky_reproducible():
    a = Starfield(StarfieldSettings(count=100, seed=11))
    b = Starfield(StarfieldSettings(count=100, seed=11))
    c = Starfield(StarfieldSettings(count=100, seed=12))

    assert np.array_equal(a.positions, b.positions)
    assert not np.array_equal(a.positions, c.positions)


def test_defaults_match_the_scene():
    stars = Starfield(StarfieldSettings())

    assert stars.count == 10000
    assert stars.point_size == 2.0
    assert stars.size_attenuation
    assert stars.opacity == 0.0
