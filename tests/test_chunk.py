import pytest

from isolated.chunk import (
    CHUNK_CELLS,
    CHUNK_SIZE,
    Chunk,
    ChunkCoord,
    Material,
    material_to_string,
    world_to_chunk,
)


@pytest.fixture(scope="module")
def chunk():
    return Chunk(ChunkCoord(2, -1, 0))


def test_chunk_cell_count(chunk):
    assert CHUNK_CELLS == 262144
    assert len(chunk.material) == CHUNK_CELLS
    assert len(chunk.temperature) == CHUNK_SIZE**3
    assert Chunk.idx(0, 0, 1) == CHUNK_SIZE * CHUNK_SIZE


def test_material_names():
    assert material_to_string(Material.CO2_ICE) == "co2_ice"
    assert material_to_string(Material.WATER_VAPOR) == "water_vapor"
    assert material_to_string(Material.URANIUM_ORE) == "uranium_ore"
    assert material_to_string(Material.GRANITE) == "granite"


def test_material_unknown_falls_back_to_air():
    assert material_to_string(Material.MAX_MATERIALS) == "air"
    assert material_to_string(9) == "air"


def test_material_names_are_unique():
    names = [material_to_string(m) for m in Material if m is not Material.MAX_MATERIALS]
    assert len(names) == len(set(names))


def test_idx_bounds():
    assert Chunk.idx(0, 0, 0) == 0
    last = CHUNK_SIZE - 1
    assert Chunk.idx(last, last, last) == CHUNK_CELLS - 1


def test_idx_is_injective_on_slice():
    seen = {Chunk.idx(x, y, z) for x in range(4) for y in range(4) for z in range(4)}
    assert len(seen) == 64


def test_world_origin(chunk):
    assert chunk.world_origin() == (2 * CHUNK_SIZE, -CHUNK_SIZE, 0)


def test_world_to_chunk_round_trip():
    for coords in [ChunkCoord(0, 0, 0), ChunkCoord(3, -2, 5), ChunkCoord(-7, 1, -1)]:
        origin = Chunk(coords).world_origin()
        assert world_to_chunk(*origin) == coords
        far = tuple(c + CHUNK_SIZE - 1 for c in origin)
        assert world_to_chunk(*far) == coords


def test_world_to_chunk_negative_floor():
    assert world_to_chunk(-1, -1, -1) == ChunkCoord(-1, -1, -1)
    assert world_to_chunk(-CHUNK_SIZE, 0, 0).x == -1
    assert world_to_chunk(-CHUNK_SIZE - 1, 0, 0).x == -2


def test_default_fields(chunk):
    assert len(chunk.material) == CHUNK_CELLS
    assert set(chunk.material) == {Material.AIR}
    assert set(chunk.temperature) == {293.0}
    assert set(chunk.density) == {1.225}
    assert set(chunk.pressure) == {101325.0}
    assert set(chunk.o2_fraction) == {0.21}
    assert set(chunk.co2_fraction) == {0.0004}
    assert len(chunk.ghost_temp) == 6
    assert all(len(face) == CHUNK_SIZE * CHUNK_SIZE for face in chunk.ghost_temp)
    assert chunk.generated is False and chunk.physics_active is True


def test_allocate_resets_data():
    c = Chunk()
    c.temperature[Chunk.idx(1, 2, 3)] = 500.0
    c.ghost_temp[0][0] = 1.0
    c.allocate()
    assert c.temperature[Chunk.idx(1, 2, 3)] == 293.0
    assert c.ghost_temp[0][0] == 293.0
    assert c.coords == ChunkCoord(0, 0, 0)


def test_ghost_faces_are_independent():
    c = Chunk()
    c.ghost_temp[0][0] = 400.0
    assert c.ghost_temp[1][0] == 293.0


def test_chunk_coord_hashable():
    d = {ChunkCoord(1, 2, 3): "a"}
    assert d[ChunkCoord(1, 2, 3)] == "a"