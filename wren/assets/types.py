from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class VertexLayout:
    attributes: List[str]  # e.g. ["in_pos", "in_normal", "in_uv"]
    format: str  # e.g. "3f 3f 2f"
    stride_bytes: int


@dataclass(frozen=True)
class MeshData:
    """Interleaved vertex data decoded from a mesh file."""

    vertices: bytes
    vertex_layout: VertexLayout
    aabb: Tuple[Tuple[float, float, float], Tuple[float, float, float]]
    vertex_count: int
    indices: Optional[bytes] = None


@dataclass(frozen=True)
class TextureData:
    data: bytes
    width: int
    height: int
    components: int  # always 4 (RGBA) after import


@dataclass(frozen=True)
class ShaderSource:
    source: str
    path: str  # For error reporting.
