# geometry/world.py
from typing import Iterable, List, Optional
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    An ordered list of objects queried for the nearest hit.

    The list is treated as immutable while a frame is being rendered.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Sphere.hit accepts t == t_max, so only a strictly closer hit replaces
        # the current one. The first object in list order wins ties.
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None and rec.t < closest_so_far:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
