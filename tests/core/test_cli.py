from duskwater.cli import build_parser, settings_from_args
from duskwater.config import AppSettings


def parse(*argv):
    return settings_from_args(build_parser().parse_args(list(argv)))


def test_defaults_pass_through():
    assert parse() == AppSettings()


def test_overrides():
    settings = parse(
        "--width", "800",
        "--height", "600",
        "--sun-angle", "80",
        "--star-seed", "9",
        "--no-water",
        "--skybox",
    )

    assert settings.window.width == 800
    assert settings.window.height == 600
    assert settings.controls.initial_sun_angle == 80.0
    assert settings.starfield.seed == 9
    assert not settings.water.enabled
    assert settings.sky.enabled
    assert settings.sky.skybox_enabled


def test_no_sky():
    assert not parse("--no-sky").sky.enabled


def test_log_level_default():
    assert build_parser().parse_args([]).log_level == "INFO"
