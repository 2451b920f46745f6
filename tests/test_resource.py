import pytest

from spriteengine.resource import Resource, ResourceType


@pytest.mark.parametrize(
    "kind, expected",
    [
        (ResourceType.SHADER, "Data/Shaders/basic.vs"),
        (ResourceType.TEXTURE, "Data/Textures/basic.vs"),
        (ResourceType.GAME_LEVEL, "Data/Maps/basic.vs"),
    ],
)
def test_file_backed_kinds_get_directory(kind, expected):
    assert Resource(kind, "basic.vs").name == expected


@pytest.mark.parametrize(
    "kind",
    [ResourceType.SHADER_PROGRAM, ResourceType.VBO, ResourceType.VAO, ResourceType.ANIMATION],
)
def test_other_kinds_keep_name(kind):
    assert Resource(kind, "VertexArrayBuffer").name == "VertexArrayBuffer"


def test_kind_and_default_id():
    res = Resource(ResourceType.ANIMATION, "animation:hero:movement")
    assert res.kind is ResourceType.ANIMATION
    assert res.resource_id == 0


def test_explicit_id():
    assert Resource(ResourceType.VBO, "buf", 7).resource_id == 7


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        Resource(ResourceType.TEXTURE, "")