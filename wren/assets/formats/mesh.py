from typing import Any, List, Tuple

import numpy as np

from wren.assets.formats.base import Format
from wren.assets.types import MeshData, VertexLayout

OBJ_LAYOUT = VertexLayout(
    attributes=["in_pos", "in_normal", "in_uv"],
    format="3f 3f 2f",
    stride_bytes=8 * 4,
)

DEFAULT_NORMAL = (0.0, 1.0, 0.0)
DEFAULT_UV = (0.0, 0.0)


class ObjFormat(Format[MeshData]):
    """Wavefront OBJ, triangles only. Emits non-indexed interleaved vertices."""

    NAME = "obj"

    def decode(self, path: str, data: bytes, options: Any) -> MeshData:
        positions: List[Tuple[float, ...]] = []
        normals: List[Tuple[float, ...]] = []
        uvs: List[Tuple[float, ...]] = []
        rows: List[Tuple[float, ...]] = []

        for line in data.decode("utf-8").splitlines():
            parts = line.split()
            if not parts or parts[0].startswith("#"):
                continue

            tag = parts[0]
            if tag == "v":
                positions.append(tuple(map(float, parts[1:4])))
            elif tag == "vn":
                normals.append(tuple(map(float, parts[1:4])))
            elif tag == "vt":
                uvs.append(tuple(map(float, parts[1:3])))
            elif tag == "f":
                if len(parts) != 4:
                    raise ValueError(
                        f"Only triangular faces supported in {path}"
                    )
                for token in parts[1:4]:
                    v_idx, vt_idx, vn_idx = self._parse_face_vertex(token)
                    try:
                        pos = positions[v_idx]
                        normal = (
                            normals[vn_idx] if vn_idx is not None else DEFAULT_NORMAL
                        )
                        uv = uvs[vt_idx] if vt_idx is not None else DEFAULT_UV
                    except IndexError as e:
                        raise ValueError(
                            f"Face references missing vertex data in {path}: {token}"
                        ) from e
                    rows.append(pos + normal + uv)

        if not rows:
            raise ValueError(f"No geometry found in OBJ: {path}")

        vertices = np.asarray(rows, dtype="<f4")
        pos = np.asarray(positions, dtype=np.float64)
        lo = tuple(float(x) for x in pos.min(axis=0))
        hi = tuple(float(x) for x in pos.max(axis=0))

        return MeshData(
            vertices=vertices.tobytes(),
            vertex_layout=OBJ_LAYOUT,
            aabb=(lo, hi),
            vertex_count=len(rows),
        )

    def _parse_index(self, val: str) -> int | None:
        if not val:
            return None
        idx = int(val)
        return idx - 1 if idx > 0 else idx

    def _parse_face_vertex(
        self, token: str
    ) -> Tuple[int, int | None, int | None]:
        parts = token.split("/")
        v = self._parse_index(parts[0])
        vt = self._parse_index(parts[1]) if len(parts) > 1 else None
        vn = self._parse_index(parts[2]) if len(parts) > 2 else None

        if v is None:
            raise ValueError(f"Invalid vertex index in token: {token}")

        return v, vt, vn
