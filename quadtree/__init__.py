from quadtree.Nodes.Point import Point
from quadtree.Nodes.Rectangle import Rectangle
from quadtree.trees.Quad_tree import QuadTree

__all__ = ["Point", "Rectangle", "QuadTree"]
