# geometry/mesh.py
import logging
import os
from typing import List, Optional, Sequence
import numpy as np
from core.vector import Vector3
from core.uv import UV
from core.ray import Ray
from core.interval import Interval
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVH

logger = logging.getLogger(__name__)

class MeshError(ValueError):
    """Raised when mesh data violates the input contract (bad indices, bad arrays, bad OBJ lines)."""

class Triangle(Hittable):
    """
    A single one-sided triangle with per-vertex texture coordinates.

    Edge vectors, the geometric normal (ab x ac, not normalized) and the
    padded bounding box are computed once here. Rays arriving from the
    back side, against the winding order, do not hit.
    """
    def __init__(self,
                 a: Vector3, b: Vector3, c: Vector3,
                 uv_a: Optional[UV] = None, uv_b: Optional[UV] = None, uv_c: Optional[UV] = None,
                 material = None):
        self.a = a
        self.ab = b - a
        self.ac = c - a
        self.uv_a = uv_a if uv_a is not None else UV(0.0, 0.0)
        self.uv_b = uv_b if uv_b is not None else UV(0.0, 0.0)
        self.uv_c = uv_c if uv_c is not None else UV(0.0, 0.0)
        self.material = material

        self.normal = self.ab.cross(self.ac)
        self.unit_normal = self.normal.normalize()

        self.box = AABB.from_points(
            Vector3(min(a.x, b.x, c.x), min(a.y, b.y, c.y), min(a.z, b.z, c.z)),
            Vector3(max(a.x, b.x, c.x), max(a.y, b.y, c.y), max(a.z, b.z, c.z))
        ).pad()

    @property
    def vertices(self):
        return self.a, self.a + self.ab, self.a + self.ac

    def hit(self, ray: Ray, interval: Interval) -> Optional[HitRecord]:
        d = -self.normal.dot(ray.direction)

        # Back face, or the ray runs parallel to the triangle's plane.
        if d <= 0.0:
            return None

        ap = ray.origin - self.a
        t = ap.dot(self.normal) / d
        if not interval.contains(t):
            return None

        # Barycentric weights with the division by d delayed until here.
        e = (-ray.direction).cross(ap)
        v = self.ac.dot(e) / d
        if v < 0.0 or v > 1.0:
            return None

        w = -self.ab.dot(e) / d
        if w < 0.0 or v + w > 1.0:
            return None

        u = 1.0 - v - w
        uv = UV.blend(self.uv_a, self.uv_b, self.uv_c, u, v, w)

        return HitRecord(ray.at(t), self.unit_normal, t, uv, self.material)

    def bounding_box(self) -> AABB:
        return self.box

    def __repr__(self) -> str:
        a, b, c = self.vertices
        return f"Triangle({a!r}, {b!r}, {c!r})"

def _check_indices(name: str, indices: np.ndarray, limit: int):
    if indices.size and (indices.min() < 0 or indices.max() >= limit):
        bad = indices[(indices < 0) | (indices >= limit)][0]
        raise MeshError(f"{name} contains index {bad} outside [0, {limit})")

def mesh_from_arrays(positions: Sequence[float], indices: Sequence[int], material,
                     texcoords: Optional[Sequence[float]] = None,
                     texcoord_indices: Optional[Sequence[int]] = None,
                     offset: Optional[Vector3] = None,
                     rng=None) -> BVH:
    """
    Turn a triangulated mesh given as flat parallel arrays into a BVH of
    Triangles.

    Args:
        positions: 3 floats per vertex
        indices: 3 vertex indices per face
        material: material shared by every triangle
        texcoords: 2 floats per texture vertex (optional)
        texcoord_indices: 3 texture-vertex indices per face, required with texcoords
        offset: translation applied to every vertex
        rng: sampler used for the BVH split axes

    Raises:
        MeshError: If array shapes or any index are out of contract
    """
    positions = np.asarray(positions, dtype=np.float64).reshape(-1)
    indices = np.asarray(indices, dtype=np.int64).reshape(-1)

    if positions.size % 3 != 0:
        raise MeshError(f"positions length {positions.size} is not a multiple of 3")
    if indices.size == 0 or indices.size % 3 != 0:
        raise MeshError(f"indices length {indices.size} is not a positive multiple of 3")
    vertex_count = positions.size // 3
    _check_indices("indices", indices, vertex_count)

    uvs = None
    if texcoords is not None:
        texcoords = np.asarray(texcoords, dtype=np.float64).reshape(-1)
        if texcoords.size % 2 != 0:
            raise MeshError(f"texcoords length {texcoords.size} is not a multiple of 2")
        if texcoord_indices is None:
            raise MeshError("texcoords given without texcoord_indices")
        texcoord_indices = np.asarray(texcoord_indices, dtype=np.int64).reshape(-1)
        if texcoord_indices.size != indices.size:
            raise MeshError(f"texcoord_indices length {texcoord_indices.size} "
                            f"does not match indices length {indices.size}")
        _check_indices("texcoord_indices", texcoord_indices, texcoords.size // 2)
        uvs = [UV(float(texcoords[i * 2]), float(texcoords[i * 2 + 1]))
               for i in range(texcoords.size // 2)]

    if offset is None:
        offset = Vector3(0.0, 0.0, 0.0)
    vertices = [Vector3(float(positions[i * 3]) + offset.x,
                        float(positions[i * 3 + 1]) + offset.y,
                        float(positions[i * 3 + 2]) + offset.z)
                for i in range(vertex_count)]

    triangles: List[Triangle] = []
    for face in range(indices.size // 3):
        i0, i1, i2 = (int(i) for i in indices[face * 3:face * 3 + 3])
        if uvs is not None:
            t0, t1, t2 = (int(i) for i in texcoord_indices[face * 3:face * 3 + 3])
            face_uvs = (uvs[t0], uvs[t1], uvs[t2])
        else:
            face_uvs = (None, None, None)
        triangles.append(Triangle(vertices[i0], vertices[i1], vertices[i2],
                                  *face_uvs, material=material))

    return BVH(triangles, rng=rng)

def _resolve_obj_index(token: str, count: int) -> int:
    index = int(token)
    # OBJ indices are 1-based; negative ones count back from the end.
    return index - 1 if index > 0 else count + index

def load_obj(filename: str, material, offset: Optional[Vector3] = None, rng=None) -> BVH:
    """
    Load a triangle mesh from an OBJ file (positions, texture coordinates
    and faces; polygons are fan-triangulated) and return it as a BVH.

    Raises:
        FileNotFoundError: If the file doesn't exist
        MeshError: If a line cannot be parsed or an index is out of range
    """
    if not os.path.exists(filename):
        raise FileNotFoundError(f"Mesh file not found: {filename}")

    positions: List[float] = []
    texcoords: List[float] = []
    faces: List[int] = []
    face_uvs: List[Optional[int]] = []

    logger.info("Loading mesh %s", filename)
    with open(filename, 'rb') as f:
        for line_num, raw in enumerate(f, 1):
            try:
                values = raw.decode('utf-8').split()
                if not values or values[0].startswith('#'):
                    continue
                if values[0] == 'v':
                    if len(values) < 4:
                        raise ValueError("vertex needs 3 coordinates")
                    positions.extend(float(x) for x in values[1:4])
                elif values[0] == 'vt':
                    u = float(values[1])
                    v = float(values[2]) if len(values) > 2 else 0.0
                    texcoords.extend((u, v))
                elif values[0] == 'f':
                    corners = []
                    for vertex_str in values[1:]:
                        parts = vertex_str.split('/')
                        v_idx = _resolve_obj_index(parts[0], len(positions) // 3)
                        t_idx = None
                        if len(parts) > 1 and parts[1]:
                            t_idx = _resolve_obj_index(parts[1], len(texcoords) // 2)
                        corners.append((v_idx, t_idx))
                    if len(corners) < 3:
                        raise ValueError("face needs at least 3 vertices")
                    for i in range(1, len(corners) - 1):
                        for v_idx, t_idx in (corners[0], corners[i], corners[i + 1]):
                            faces.append(v_idx)
                            face_uvs.append(t_idx)
            except (ValueError, IndexError) as e:
                # UnicodeDecodeError is a ValueError too.
                text = raw.decode('utf-8', errors='replace').strip()
                raise MeshError(f"{filename}:{line_num}: cannot parse {text!r}: {e}") from e

    if not faces:
        raise MeshError(f"{filename}: no faces found")

    uv_array = None
    uv_indices = None
    if any(t is not None for t in face_uvs):
        # Corners without a texture index share an extra (0, 0) coordinate.
        fallback = len(texcoords) // 2
        if any(t is None for t in face_uvs):
            texcoords.extend((0.0, 0.0))
        uv_array = texcoords
        uv_indices = [fallback if t is None else t for t in face_uvs]

    bvh = mesh_from_arrays(positions, faces, material, uv_array, uv_indices, offset=offset, rng=rng)
    logger.info("Loaded %d vertices, %d UVs, %d triangles",
                len(positions) // 3, len(texcoords) // 2, len(faces) // 3)
    return bvh
