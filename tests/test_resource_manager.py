import pytest

from spriteengine.resource_manager import ResourceManager, destroy_instance, instance
from spriteengine.shader import Shader
from spriteengine.texture import Texture


@pytest.fixture
def data(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shaders = tmp_path / "Data" / "Shaders"
    shaders.mkdir(parents=True)
    (shaders / "basic.vs").write_text("void main() {}")
    (tmp_path / "Data" / "Textures").mkdir(parents=True)
    yield tmp_path
    destroy_instance()


def test_add_and_get_shader(data):
    manager = ResourceManager()
    shader = manager.add_shader("basic.vs")
    assert isinstance(shader, Shader)
    assert manager.get_shader("basic.vs") is shader
    assert manager.get_resource("basic.vs") is shader


def test_adding_twice_keeps_first(data):
    manager = ResourceManager()
    first = manager.add_shader("basic.vs")
    second = manager.add_shader("basic.vs")
    assert first is second
    assert len(manager) == 1


def test_missing_texture_is_still_registered(data):
    manager = ResourceManager()
    texture = manager.add_texture("absent.png")
    assert isinstance(texture, Texture)
    assert texture.surface is None
    assert manager.get_texture("absent.png") is texture


def test_wrong_kind_raises(data):
    manager = ResourceManager()
    manager.add_shader("basic.vs")
    with pytest.raises(TypeError):
        manager.get_texture("basic.vs")


def test_unknown_name_raises(data):
    manager = ResourceManager()
    with pytest.raises(KeyError):
        manager.get_shader("nothing.vs")
    assert manager.get_resource("nothing.vs") is None


def test_empty_name_rejected(data):
    with pytest.raises(ValueError):
        ResourceManager().get_resource("")


def test_instance_is_shared_until_destroyed(data):
    first = instance()
    assert instance() is first
    first.add_shader("basic.vs")
    destroy_instance()
    second = instance()
    assert second is not first
    assert len(second) == 0
    assert len(first) == 0