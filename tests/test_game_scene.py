import pygame
import pytest

from spriteengine.errors import EngineError
from spriteengine.game_scene import BIRD, MOUNTAINS, SUN, GameScene, Key
from spriteengine.resource_manager import destroy_instance

WIDTH = 20
HEIGHT = 6


def _write_level(root, width=WIDTH, height=HEIGHT):
    rows = [
        ",".join("2" if y == height - 1 else "1" for _ in range(width)) for y in range(height)
    ]
    data = ",\n".join(rows)
    text = f"""<?xml version="1.0" encoding="UTF-8"?>
<map version="1.0" orientation="orthogonal" width="{width}" height="{height}">
 <tileset firstgid="1" name="tiles" tilewidth="32" tileheight="32" tilecount="4" columns="2">
  <image source="../Textures/tiles.png" width="64" height="64"/>
  <tile id="1"><objectgroup><object id="1" x="0" y="0" width="100" height="100"/></objectgroup></tile>
 </tileset>
 <layer name="ground" width="{width}" height="{height}">
  <data encoding="csv">{data}</data>
 </layer>
</map>
"""
    maps = root / "Data" / "Maps"
    maps.mkdir(parents=True)
    (maps / "level01.tmx").write_text(text, encoding="utf-8")


@pytest.fixture
def scene(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_level(tmp_path)
    destroy_instance()
    game = GameScene(800, 600)
    yield game
    game.close()


def test_scene_objects(scene):
    assert list(scene) == [
        "sceneObject:bird",
        "sceneObject:gameLevel:Data/Maps/level01.tmx",
        "sceneObject:iceman",
        "sceneObject:mountains",
        "sky",
    ] or list(scene) == sorted(scene.items())
    assert SUN in scene.items()
    assert len(scene) == 6


def test_mountains_placement(scene):
    mountains = scene.get(MOUNTAINS)
    assert mountains.y == 150
    assert mountains.height == scene.height - 150
    assert mountains.texture.wrap.value == "repeat"


def test_left_key(scene):
    scene.handle_input({Key.LEFT})
    assert scene.hero.mirrored is True
    assert scene.hero.speed[0] == -1.0


def test_right_key(scene):
    scene.handle_input({Key.D})
    assert scene.hero.mirrored is False
    assert scene.hero.speed[0] == 1.0


def test_jump_only_when_not_jumping(scene):
    scene.handle_input({Key.SPACE})
    assert scene.hero.in_jump is True
    scene.hero.set_speed((0.0, 0.0))
    scene.handle_input({Key.UP})
    assert scene.hero.speed == (0.0, 0.0)


def test_down_only_without_gravity(scene):
    scene.handle_input({Key.DOWN})
    assert scene.hero.speed[1] == 0.0
    scene.handle_input({Key.G})
    assert scene.gravity is False
    scene.handle_input({Key.S})
    assert scene.hero.speed[1] == 5.0


def test_escape_requests_close(scene):
    assert scene.should_close is False
    scene.handle_input({Key.ESCAPE})
    assert scene.should_close is True


def test_scroll_map(scene):
    scene.scroll_map(-50.0)
    assert scene.level.x == -50.0
    assert scene.background_shift == pytest.approx(0.01)
    assert scene.mountains.program.get_uniform("shiftX") == pytest.approx(scene.background_shift)


def test_gravity_builds_downward_speed(scene):
    y0 = scene.hero.y
    scene.move_hero(0.1)
    assert scene.hero.y == y0
    speed = scene.hero.speed[1]
    assert speed > 0
    scene.move_hero(0.1)
    assert scene.hero.y == pytest.approx(y0 + speed)


def test_hero_lands_on_ground(scene):
    for _ in range(100):
        scene.move_hero(0.1)
    assert scene.hero.collision_rect.bottom <= scene.level.tile_size * (HEIGHT - 1)
    assert scene.hero.y > 310
    assert scene.hero.in_jump is False


def test_moving_right_past_middle_scrolls_level(scene):
    scene.gravity = False
    scene.hero.move_to(500, 310, scene.hero.z)
    scene.hero.set_speed((1.0, 0.0))
    scene.move_hero(0.01)
    assert scene.level.x == -1.0
    assert scene.hero.x == 500


def test_left_screen_edge_stops_hero(scene):
    scene.gravity = False
    scene.hero.move_to(0, 310, scene.hero.z)
    scene.hero.set_speed((-1.0, 0.0))
    scene.move_hero(0.01)
    assert scene.hero.x == 0
    assert scene.level.x == 0


def test_friction_stops_horizontal_speed(scene):
    scene.gravity = False
    scene.hero.move_to(200, 310, scene.hero.z)
    scene.hero.set_speed((1.0, 0.0))
    scene.move_hero(1.0)
    assert scene.hero.speed == (0.0, 0.0)
    assert scene.hero.x == 201


def test_update_moves_bird_and_sun(scene):
    bird = scene.get(BIRD)
    x0 = bird.x
    scene.update(0.01, set())
    assert bird.x == x0 + 1
    assert scene.get(SUN).angle == pytest.approx(0.01)


def test_bird_turns_at_right_edge(scene):
    bird = scene.get(BIRD)
    bird.move_to(790, 100, bird.z)
    scene.update(0.01, set())
    assert bird.mirrored is True
    assert bird.x == 789


def test_render_marks_visible_tiles(scene):
    surface = pygame.Surface((800, 600))
    scene.render(surface)
    tiles = scene.level.layers["ground"].tiles
    assert tiles[0].on_screen is True
    assert tiles[WIDTH - 1].on_screen is False


def test_missing_level_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    destroy_instance()
    try:
        with pytest.raises(EngineError):
            GameScene(800, 600)
    finally:
        destroy_instance()