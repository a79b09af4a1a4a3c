import pytest

from duskwater.graphics.lights import AmbientLight, DirectionalLight
from duskwater.types import HSL, Vector3, hex_to_rgb


def test_hsl_primaries():
    assert HSL(0.0, 1.0, 0.5).to_rgb() == pytest.approx((1.0, 0.0, 0.0))
    assert HSL(1 / 3, 1.0, 0.5).to_rgb() == pytest.approx((0.0, 1.0, 0.0))
    assert HSL(0.6, 0.0, 0.5).to_rgb() == pytest.approx((0.5, 0.5, 0.5))


def test_hsl_wraps_hue_and_clamps():
    assert HSL(1.25, 1.0, 0.5).to_rgb() == pytest.approx(HSL(0.25, 1.0, 0.5).to_rgb())
    assert HSL(0.3, 2.0, 1.5).to_rgb() == pytest.approx((1.0, 1.0, 1.0))


def test_hex_to_rgb():
    assert hex_to_rgb(0x87CEEB) == pytest.approx((135 / 255, 206 / 255, 235 / 255))
    assert hex_to_rgb(0x000000) == (0.0, 0.0, 0.0)


def test_vector_helpers():
    v = Vector3(3.0, 0.0, 4.0)
    assert v.length() == 5.0
    assert v.normalized().is_close(Vector3(0.6, 0.0, 0.8))
    assert Vector3.zero().normalized() == Vector3.zero()
    assert -v == Vector3(-3.0, -0.0, -4.0)
    assert 2.0 * v == v * 2.0
    assert v[0:2] == (3.0, 0.0)

    with pytest.raises(ValueError):
        v / 0.0


def test_light_radiance_and_direction():
    ambient = AmbientLight(color=(0.5, 0.5, 0.5), intensity=0.2)
    assert ambient.radiance == pytest.approx((0.1, 0.1, 0.1))

    sun = DirectionalLight(position=Vector3(0.0, 1000.0, 0.0), intensity=1.5)
    assert sun.direction.is_close(Vector3(0.0, 1.0, 0.0))
    assert sun.radiance == pytest.approx((1.5, 1.5, 1.5))
