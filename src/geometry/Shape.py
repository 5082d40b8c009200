from geometry import Crossing


class Shape:
    """Common interface of the outline shapes.

    Subclasses provide bounds() and path_iterator(). The default containment
    and intersection queries run the crossing engine over the outline with
    the even-odd rule; _is_inside() can be overridden to use another rule.
    """

    def bounds(self, result=None):
        raise NotImplementedError

    @property
    def is_empty(self) -> bool:
        raise NotImplementedError

    def path_iterator(self, transform=None, flatness=None):
        raise NotImplementedError

    def _is_inside(self, cross: int) -> bool:
        return Crossing.is_inside_even_odd(cross)

    def contains(self, x: float, y: float) -> bool:
        return self._is_inside(Crossing.cross_shape(self, x, y))

    def contains_point(self, p) -> bool:
        return self.contains(p.x, p.y)

    def contains_rect(self, x: float, y: float, w: float, h: float) -> bool:
        cross = Crossing.intersect_shape(self, x, y, w, h)
        return cross != Crossing.CROSSING and self._is_inside(cross)

    def intersects(self, x: float, y: float, w: float, h: float) -> bool:
        cross = Crossing.intersect_shape(self, x, y, w, h)
        return cross == Crossing.CROSSING or self._is_inside(cross)

    def intersects_rect(self, r) -> bool:
        return self.intersects(r.x, r.y, r.width, r.height)
