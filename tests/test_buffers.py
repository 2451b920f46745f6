import pytest

from spriteengine.buffers import (
    QUAD_CENTRED_UV,
    QUAD_UV,
    AttributeLayout,
    VertexArray,
    VertexBuffer,
    VertexUV,
)
from spriteengine.resource import ResourceType


def test_quads_have_four_vertices():
    assert len(QUAD_UV) == 4
    assert len(QUAD_CENTRED_UV) == 4
    assert QUAD_CENTRED_UV[0] == VertexUV((-1.0, 1.0, 0.0), (0.0, 0.0))


def test_buffer_resource_identity():
    buf = VertexBuffer()
    assert buf.kind is ResourceType.VBO
    assert buf.name == "VertexBufferObject"
    assert buf.resource_id != VertexBuffer().resource_id


def test_nothing_uploaded_initially():
    assert VertexBuffer().uploaded_vertices() is None


def test_add_data_queues_vertices():
    buf = VertexBuffer()
    buf.add_data(QUAD_UV)
    assert buf.pending_vertices() == QUAD_UV


def test_add_empty_data_raises():
    with pytest.raises(ValueError):
        VertexBuffer().add_data([])


def test_upload_packs_rows_and_clears_queue():
    buf = VertexBuffer()
    buf.bind("array")
    buf.add_data(QUAD_UV)
    buf.upload("static")
    data = buf.uploaded_vertices()
    assert data.shape == (4, 5)
    assert tuple(data[1]) == QUAD_UV[1].as_row()
    assert buf.pending_vertices() == ()
    assert buf.drawing_hint == "static"


def test_uploaded_copy_is_independent():
    buf = VertexBuffer()
    buf.add_data(QUAD_CENTRED_UV)
    buf.upload()
    first = buf.uploaded_vertices()
    first[0, 0] = 99.0
    assert buf.uploaded_vertices()[0, 0] == QUAD_CENTRED_UV[0].coord[0]


def test_vertex_array_bound_on_creation_and_unbind():
    vao = VertexArray()
    assert vao.bound
    vao.unbind()
    assert not vao.bound
    assert vao.name == "VertexArrayBuffer"


def test_generate_records_layout():
    vao = VertexArray()
    vao.generate("inCoord", 2, 5, 3)
    assert vao.layouts["inCoord"] == AttributeLayout(2, 5, 3)


@pytest.mark.parametrize("size, stride", [(0, 5), (3, 0)])
def test_generate_rejects_non_positive(size, stride):
    with pytest.raises(ValueError):
        VertexArray().generate("inPosition", size, stride, 0)