from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    # (x, y) = centro del rectángulo
    x: float
    y: float
    w: float  # mitad del ancho
    h: float  # mitad del alto

    def contains(self, point):
        # bordes incluidos
        return (self.x - self.w <= point.x <= self.x + self.w and
                self.y - self.h <= point.y <= self.y + self.h)
