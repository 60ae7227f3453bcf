# geometry/bvh.py
import logging
import random
from typing import List, Optional, Sequence
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class BVHNode:
    """
    One interior node of the arena. `left` and `right` are child
    references: a value >= 0 indexes BVH.nodes, a negative value is the
    bitwise complement of an index into BVH.objects.
    """
    __slots__ = ("box", "left", "right")

    def __init__(self, box: AABB, left: int, right: int):
        self.box = box
        self.left = left
        self.right = right

class BVH(Hittable):
    """
    Bounding volume hierarchy over a fixed list of hittables.

    Nodes live in a flat list and reference each other by index; the tree
    is built once and never mutated, so it can be shared by render threads.
    Each level splits on a randomly chosen axis at the median of the
    sorted box minima. A single object fills both child slots of its node.
    """
    def __init__(self, objects: Sequence[Hittable], rng=None):
        if len(objects) == 0:
            raise ValueError("Cannot build a BVH over an empty object list")
        self.objects: List[Hittable] = list(objects)
        # Zero-thickness boxes would fail the strict slab test, pad them once.
        self.boxes: List[AABB] = [obj.bounding_box().pad() for obj in self.objects]
        self.nodes: List[BVHNode] = []
        self._rng = rng if rng is not None else random
        self.root = self._build(list(range(len(self.objects))))
        self._rng = None
        logger.debug("Built BVH over %d objects: %d nodes, depth %d",
                     len(self.objects), self.node_count, self.depth())

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def _child_box(self, ref: int) -> AABB:
        if ref < 0:
            return self.boxes[~ref]
        return self.nodes[ref].box

    def _build(self, indices: List[int]) -> int:
        axis = self._rng.randint(0, 2)
        span = len(indices)

        if span == 1:
            left = right = ~indices[0]
        elif span == 2:
            a, b = indices
            if self.boxes[a].axis_interval(axis).min < self.boxes[b].axis_interval(axis).min:
                left, right = ~a, ~b
            else:
                left, right = ~b, ~a
        else:
            indices = sorted(indices, key=lambda i: self.boxes[i].axis_interval(axis).min)
            mid = span // 2
            left = self._build(indices[:mid])
            right = self._build(indices[mid:])

        box = AABB.surrounding_box(self._child_box(left), self._child_box(right))
        self.nodes.append(BVHNode(box, left, right))
        return len(self.nodes) - 1

    def _hit_ref(self, ref: int, ray: Ray, interval: Interval) -> Optional[HitRecord]:
        if ref < 0:
            return self.objects[~ref].hit(ray, interval)

        node = self.nodes[ref]
        if not node.box.hit(ray, interval):
            return None

        hit_left = self._hit_ref(node.left, ray, interval)
        if node.right == node.left:
            return hit_left

        # Anything the right subtree returns is nearer than the left hit.
        if hit_left is not None:
            interval = Interval(interval.min, hit_left.t)
        hit_right = self._hit_ref(node.right, ray, interval)

        return hit_right if hit_right is not None else hit_left

    def hit(self, ray: Ray, interval: Interval) -> Optional[HitRecord]:
        return self._hit_ref(self.root, ray, interval)

    def bounding_box(self) -> AABB:
        return self.nodes[self.root].box

    def depth(self) -> int:
        def walk(ref: int) -> int:
            if ref < 0:
                return 0
            node = self.nodes[ref]
            return 1 + max(walk(node.left), walk(node.right))
        return walk(self.root)
