"""Chunk voxel storage for streamed worlds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

CHUNK_SIZE = 64
CHUNK_CELLS = CHUNK_SIZE * CHUNK_SIZE * CHUNK_SIZE

_FACE_CELLS = CHUNK_SIZE * CHUNK_SIZE


class Material(IntEnum):
    """Terrain material identifiers stored one byte per voxel."""

    # Gases
    AIR = 0
    OXYGEN = 1
    NITROGEN = 2
    CO2 = 3
    METHANE = 4
    WATER_VAPOR = 5
    HYDROGEN = 6
    AMMONIA = 7
    SULFUR_DIOXIDE = 8
    # Liquids
    WATER = 10
    MAGMA = 11
    # Natural solids
    ICE = 20
    CO2_ICE = 21
    GRANITE = 30
    BASALT = 31
    LIMESTONE = 32
    SANDSTONE = 33
    SHALE = 34
    MARBLE = 35
    REGOLITH = 36
    SOIL = 37
    # Manufactured
    STEEL = 50
    # Biological
    FLESH = 60
    # Ores
    IRON_ORE = 100
    COPPER_ORE = 101
    GOLD_ORE = 102
    COAL = 103
    URANIUM_ORE = 104

    MAX_MATERIALS = 255


_MATERIAL_NAMES = {
    mat: mat.name.lower() for mat in Material if mat is not Material.MAX_MATERIALS
}


def material_to_string(mat: Material | int) -> str:
    """Return the material lookup key; unknown values map to ``"air"``."""
    try:
        return _MATERIAL_NAMES.get(Material(mat), "air")
    except ValueError:
        return "air"


@dataclass(frozen=True)
class ChunkCoord:
    """World-space chunk index."""

    x: int
    y: int
    z: int


def world_to_chunk(world_x: int, world_y: int, world_z: int) -> ChunkCoord:
    """Chunk containing a world cell, using floor division for negatives."""
    return ChunkCoord(
        world_x // CHUNK_SIZE, world_y // CHUNK_SIZE, world_z // CHUNK_SIZE
    )


@dataclass(eq=False)
class Chunk:
    """All voxel data for one CHUNK_SIZE^3 region of the world."""

    coords: ChunkCoord = field(default_factory=lambda: ChunkCoord(0, 0, 0))
    generated: bool = False
    dirty: bool = False
    physics_active: bool = True

    def __post_init__(self) -> None:
        self.allocate()

    def allocate(self) -> None:
        """(Re)fill every field with its default value."""
        self.material: list[Material] = [Material.AIR] * CHUNK_CELLS
        self.strata_age: list[int] = [0] * CHUNK_CELLS
        self.temperature: list[float] = [293.0] * CHUNK_CELLS
        self.density: list[float] = [1.225] * CHUNK_CELLS
        self.pressure: list[float] = [101325.0] * CHUNK_CELLS
        self.o2_fraction: list[float] = [0.21] * CHUNK_CELLS
        self.co2_fraction: list[float] = [0.0004] * CHUNK_CELLS
        # Ghost faces: +X, -X, +Y, -Y, +Z, -Z
        self.ghost_temp: list[list[float]] = [
            [293.0] * _FACE_CELLS for _ in range(6)
        ]

    @staticmethod
    def idx(x: int, y: int, z: int) -> int:
        """Flat index of a local cell."""
        return x + CHUNK_SIZE * (y + CHUNK_SIZE * z)

    def world_origin(self) -> tuple[int, int, int]:
        """World position of the chunk's (0, 0, 0) corner."""
        return (
            self.coords.x * CHUNK_SIZE,
            self.coords.y * CHUNK_SIZE,
            self.coords.z * CHUNK_SIZE,
        )