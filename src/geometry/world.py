# geometry/world.py
import logging
from typing import Optional, List
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVH

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    The scene aggregate: a list of Hittable objects with a running bounding
    box. Queries scan the list until build_bvh() is called, after which
    they go through the BVH. The scene must not change while rendering.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = []
        self.box = AABB.EMPTY
        self.bvh_root: Optional[BVH] = None
        for obj in objects or []:
            self.add(obj)

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.box = AABB.surrounding_box(self.box, obj.bounding_box())
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, rng=None):
        if len(self.objects) == 0:
            self.bvh_root = None
            return
        self.bvh_root = BVH(self.objects, rng=rng)
        logger.info("BVH built over %d objects (%d nodes, depth %d)",
                    len(self.objects), self.bvh_root.node_count, self.bvh_root.depth())

    def hit(self, ray: Ray, interval: Interval) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, interval)
        hit_record = None
        closest_so_far = interval.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(interval.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.box
