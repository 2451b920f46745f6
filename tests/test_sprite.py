import pygame
import pytest

from spriteengine.program import ShaderProgram
from spriteengine.shader import Shader
from spriteengine.sprite import Sprite
from spriteengine.texture import Texture

VERTEX = """in vec3 inPosition;
in vec2 inCoord;
uniform mat4 MVP;
void main() {}
"""
FRAGMENT = """uniform sampler2D gSampler;
uniform float alpha;
void main() {}
"""
RED = (255, 0, 0)
BLACK = (0, 0, 0)


@pytest.fixture
def program(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    directory = tmp_path / "Data" / "Shaders"
    directory.mkdir(parents=True)
    (directory / "basic.vs").write_text(VERTEX)
    (directory / "basic.fs").write_text(FRAGMENT)
    return ShaderProgram(Shader("basic.vs"), Shader("basic.fs"))


@pytest.fixture
def texture(program):
    tex = Texture("sky.png", use_empty=True)
    tex.surface.fill((*RED, 255))
    return tex


def colour_at(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_texture_required(program):
    with pytest.raises(ValueError):
        Sprite(False, program, None)


def test_texture_must_be_texture(program):
    with pytest.raises(TypeError):
        Sprite(False, program, Shader("basic.vs"))


def test_texture_setter(program, texture):
    sprite = Sprite(False, program, texture)
    other = Texture("other.png", use_empty=True)
    sprite.texture = other
    assert sprite.texture is other
    with pytest.raises(ValueError):
        sprite.texture = None


def test_screen_rect_hanging_and_centred(program, texture):
    hanging = Sprite(False, program, texture)
    hanging.place(10, 20, 0, 50, 40)
    centred = Sprite(True, program, texture)
    centred.place(100, 100, 0, 10, 20)
    assert hanging.screen_rect == (10, 20, 50, 40)
    assert centred.screen_rect == (90, 80, 20, 40)


def test_render_draws_hanging_sprite(program, texture):
    target = pygame.Surface((800, 600))
    sprite = Sprite(False, program, texture)
    sprite.place(10, 20, 0, 50, 40)
    sprite.render(target)
    assert colour_at(target, (30, 40)) == RED
    assert colour_at(target, (5, 5)) == BLACK
    assert colour_at(target, (70, 40)) == BLACK


def test_render_draws_centred_sprite(program, texture):
    target = pygame.Surface((800, 600))
    sprite = Sprite(True, program, texture)
    sprite.place(100, 100, 0, 10, 10)
    sprite.render(target)
    assert colour_at(target, (95, 95)) == RED
    assert colour_at(target, (85, 85)) == BLACK


def test_render_unbinds_program(program, texture):
    sprite = Sprite(False, program, texture)
    sprite.place(0, 0, 0, 5, 5)
    sprite.render(None)
    assert not program.in_use()
    assert sprite.mvp_updated


def test_rotated_sprite_keeps_its_centre(program, texture):
    target = pygame.Surface((800, 600))
    sprite = Sprite(True, program, texture)
    sprite.place(200, 200, 0, 30, 30)
    sprite.rotate(0.5)
    sprite.render(target)
    assert colour_at(target, (200, 200)) == RED
    assert colour_at(target, (100, 100)) == BLACK


def test_render_without_pixels_draws_nothing(program):
    target = pygame.Surface((100, 100))
    missing = Texture("missing.png")
    sprite = Sprite(False, program, missing)
    sprite.place(0, 0, 0, 50, 50)
    sprite.render(target)
    assert colour_at(target, (10, 10)) == BLACK