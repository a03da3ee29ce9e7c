from numbers import Real

from quadtree.config import DEFAULT_CAPACITY
from quadtree.Nodes.Rectangle import Rectangle
from quadtree.utils.loggers import get_logger

logger = get_logger("quad_tree")

# orden fijo de recorrido; en los bordes compartidos gana el primero
QUADRANTS = ("northwest", "northeast", "southwest", "southeast")

_TYPE_NAMES = {str: "string", bool: "boolean", type(None): "null"}


def _type_name(value):
    return _TYPE_NAMES.get(type(value), type(value).__name__)


class QuadTree:
    """Nodo de un quadtree de región.

    Guarda hasta ``capacity`` puntos; el punto que desborda el nodo provoca
    la subdivisión en cuatro hijos (northwest, northeast, southwest,
    southeast) y se inserta en el primero que lo contenga. Los hijos no
    existen como atributos hasta que el nodo se divide.
    """

    def __init__(self, boundary, capacity=DEFAULT_CAPACITY):
        if boundary is None:
            raise TypeError("boundary is null or undefined")
        if not isinstance(boundary, Rectangle):
            raise TypeError("boundary should be a Rectangle")
        if isinstance(capacity, bool) or not isinstance(capacity, Real):
            raise TypeError(f"capacity should be a number but is a {_type_name(capacity)}")
        if not capacity >= 1:
            raise ValueError("capacity must be greater than 0")

        self.boundary = boundary
        self.capacity = capacity
        self.points = []
        self.divided = False

    def subdivide(self):
        """Crea los cuatro hijos una sola vez; los puntos ya guardados se quedan aquí."""
        if self.divided:
            return

        x, y = self.boundary.x, self.boundary.y
        w, h = self.boundary.w / 2, self.boundary.h / 2

        nw = Rectangle(x - w, y - h, w, h)
        ne = Rectangle(x + w, y - h, w, h)
        sw = Rectangle(x - w, y + h, w, h)
        se = Rectangle(x + w, y + h, w, h)

        self.northwest = QuadTree(nw, self.capacity)
        self.northeast = QuadTree(ne, self.capacity)
        self.southwest = QuadTree(sw, self.capacity)
        self.southeast = QuadTree(se, self.capacity)

        self.divided = True
        logger.debug("subdivided %r into quadrants of %s x %s", self.boundary, w, h)

    def insert(self, point):
        if not self.boundary.contains(point):
            logger.debug("%r outside %r", point, self.boundary)
            return False

        if not self.divided:
            if len(self.points) < self.capacity:
                self.points.append(point)
                return True
            self.subdivide()

        for name in QUADRANTS:
            if getattr(self, name).insert(point):
                return True

        return False

    def children(self):
        """Hijos en orden NW, NE, SW, SE (lista vacía si no está dividido)."""
        if not self.divided:
            return []
        return [getattr(self, name) for name in QUADRANTS]

    def __repr__(self):
        return f"QuadTree({self.boundary!r}, capacity={self.capacity}, points={len(self.points)}, divided={self.divided})"
