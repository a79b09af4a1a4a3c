import moderngl
import pytest

from duskwater.graphics.capabilities import (
    SKY,
    WATER,
    CapabilityUnavailable,
    ShaderProbe,
    StaticProbe,
)
from duskwater.graphics.shaders import (
    SHADER_DIR,
    ShaderId,
    ShaderManager,
    ShaderRequest,
    load_source,
)
from duskwater.graphics.sky import SKY_SHADER
from duskwater.graphics.starfield import STAR_SHADER
from duskwater.graphics.water import FLAT_SHADER, WATER_SHADER


class FakeShaders:
    """Pretends to compile: fails for the ids it is told to."""

    def __init__(self, error=None):
        self.error = error
        self.requested = []

    def get(self, req):
        self.requested.append(req.shader_id)
        if self.error is not None:
            raise self.error
        return object()


@pytest.mark.parametrize("req", [SKY_SHADER, WATER_SHADER, FLAT_SHADER, STAR_SHADER])
def test_every_program_has_both_stages(req):
    for name in (req.vertex, req.fragment):
        source = load_source(name)
        assert source.startswith("#version 330")
        assert "void main()" in source


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_source("nope.frag", tmp_path)


class FakeProgram:
    def __init__(self, vertex_shader, fragment_shader):
        self.vertex_shader = vertex_shader
        self.fragment_shader = fragment_shader
        self.released = False

    def release(self):
        self.released = True


class FakeGL:
    def __init__(self):
        self.programs = []

    def program(self, vertex_shader, fragment_shader):
        prog = FakeProgram(vertex_shader, fragment_shader)
        self.programs.append(prog)
        return prog


def test_manager_compiles_once_per_id(tmp_path):
    (tmp_path / "a.vert").write_text("vert", encoding="utf-8")
    (tmp_path / "a.frag").write_text("frag", encoding="utf-8")
    gl = FakeGL()
    shaders = ShaderManager(gl, tmp_path)
    req = ShaderRequest(ShaderId("a"), "a.vert", "a.frag")

    first = shaders.get(req)
    assert shaders.get(req) is first
    assert len(gl.programs) == 1
    assert (first.vertex_shader, first.fragment_shader) == ("vert", "frag")

    shaders.release()
    assert first.released
    assert shaders.get(req) is not first


def test_manager_missing_file_raises(tmp_path):
    shaders = ShaderManager(FakeGL(), tmp_path)
    with pytest.raises(FileNotFoundError):
        shaders.get(ShaderRequest(ShaderId("b"), "b.vert", "b.frag"))


def test_shader_dir_is_packaged():
    assert (SHADER_DIR / "sky.frag").exists()


def test_static_probe():
    probe = StaticProbe({SKY})
    probe.require(SKY)
    with pytest.raises(CapabilityUnavailable):
        probe.require(WATER)


def test_shader_probe_compiles_registered_program():
    shaders = FakeShaders()
    probe = ShaderProbe(shaders, {SKY: SKY_SHADER})

    probe.require(SKY)
    assert shaders.requested == [SKY_SHADER.shader_id]

    with pytest.raises(CapabilityUnavailable):
        probe.require(WATER)


@pytest.mark.parametrize(
    "error", [moderngl.Error("link failed"), FileNotFoundError("water.frag")]
)
def test_shader_probe_turns_build_errors_into_unavailable(error):
    probe = ShaderProbe(FakeShaders(error), {WATER: WATER_SHADER})

    with pytest.raises(CapabilityUnavailable) as info:
        probe.require(WATER)
    assert info.value.__cause__ is error
