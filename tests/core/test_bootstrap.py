import logging
from dataclasses import replace

import pytest

from duskwater.core.bootstrap import SceneBootstrap
from duskwater.core.context import Viewport
from duskwater.graphics.capabilities import SKY, WATER, StaticProbe
from duskwater.graphics.sky import AtmosphereSky, FlatSky
from duskwater.graphics.water import FlatWater, ShaderWater
from duskwater.types import Vector3, hex_to_rgb


def build(settings, available):
    return SceneBootstrap(settings, StaticProbe(available)).build(Viewport(1280, 720))


def test_full_featured_scene(scene):
    assert isinstance(scene.sky, AtmosphereSky)
    assert isinstance(scene.water, ShaderWater)
    assert not scene.sky.is_fallback
    assert not scene.water.is_fallback


def test_camera_starts_at_configured_pose(scene):
    cam = scene.camera
    assert cam.position == Vector3(0.0, 100.0, 1000.0)
    assert cam.fov == 60.0
    assert cam.near == 1.0
    assert cam.far == 20000.0
    assert cam.aspect == pytest.approx(1280 / 720)

    expected = (Vector3(0.0, 0.0, -1000.0) - cam.position).normalized()
    assert cam.forward.is_close(expected, tol=1e-12)


def test_initial_lights_and_background(scene):
    assert scene.background.color == pytest.approx(hex_to_rgb(0x87CEEB))
    assert scene.ambient.color == pytest.approx(hex_to_rgb(0x404040))
    assert scene.directional.color == (1.0, 1.0, 1.0)
    assert scene.directional.intensity == 0.5
    assert scene.starfield.opacity == 0.0
    assert scene.environment is None


def test_missing_sky_falls_back(settings, caplog):
    with caplog.at_level(logging.ERROR):
        ctx = build(settings, {WATER})

    assert isinstance(ctx.sky, FlatSky)
    assert isinstance(ctx.water, ShaderWater)
    assert "sky unavailable" in caplog.text


def test_missing_water_falls_back(settings, caplog):
    with caplog.at_level(logging.ERROR):
        ctx = build(settings, {SKY})

    assert isinstance(ctx.sky, AtmosphereSky)
    assert isinstance(ctx.water, FlatWater)
    assert ctx.water.color == pytest.approx(hex_to_rgb(0x0077BE))
    assert "water unavailable" in caplog.text


def test_both_missing_still_builds(settings):
    ctx = build(settings, set())

    assert ctx.sky.is_fallback
    assert ctx.water.is_fallback
    assert ctx.starfield.count == 256


def test_disabled_in_settings_skips_probe(settings, caplog):
    off = replace(
        settings,
        sky=replace(settings.sky, enabled=False),
        water=replace(settings.water, enabled=False),
    )
    with caplog.at_level(logging.ERROR):
        ctx = build(off, {SKY, WATER})

    assert isinstance(ctx.sky, FlatSky)
    assert isinstance(ctx.water, FlatWater)
    assert "unavailable" not in caplog.text


def test_renderables_order(settings):
    with_box = replace(settings, sky=replace(settings.sky, skybox_enabled=True))
    ctx = build(with_box, {SKY, WATER})

    order = list(ctx.renderables())
    assert order == [ctx.sky, ctx.skybox, ctx.water, ctx.starfield]


def test_resize_updates_camera_aspect(scene):
    scene.resize(1000, 500)
    assert scene.viewport.width == 1000
    assert scene.camera.aspect == pytest.approx(2.0)

    scene.resize(0, 0)
    assert scene.viewport.height == 1
    assert scene.camera.aspect == pytest.approx(1.0)


def test_default_viewport_comes_from_window_settings(settings):
    ctx = SceneBootstrap(settings, StaticProbe({SKY, WATER})).build()

    assert (ctx.viewport.width, ctx.viewport.height) == (1280, 720)
    assert ctx.water_time.fixed_delta_seconds == pytest.approx(1 / 60)
