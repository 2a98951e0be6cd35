# geometry/intersection.py
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union


@dataclass(frozen=True)
class Intersection:
    """
    Records where (at which ray parameter t) a ray hit which object.
    """
    t: float
    object: "Hittable"


# Intersections in the order they were computed, not sorted by t.
# An empty list is a miss.
IntersectionResult = List[Intersection]


def intersections(*items: Union[Intersection, Iterable[Intersection]]) -> IntersectionResult:
    """
    Aggregates single intersections and whole intersection results into one
    result, keeping the order of the arguments.
    """
    xs: IntersectionResult = []
    for item in items:
        if isinstance(item, Intersection):
            xs.append(item)
        else:
            xs.extend(item)
    return xs


def hit(xs: Iterable[Intersection]) -> Optional[Intersection]:
    """
    Returns the visible intersection: the one with the lowest non-negative t.
    Negative t values lie behind the ray's origin. On ties the intersection
    that came first wins.
    """
    candidates = [i for i in xs if i.t >= 0]
    if not candidates:
        return None
    return min(candidates, key=lambda i: i.t)
