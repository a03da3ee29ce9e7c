import pytest

from quadtree import QuadTree, Rectangle


@pytest.fixture
def rect():
    return Rectangle(100, 100, 10, 10)


@pytest.fixture
def insert_tree():
    return QuadTree(Rectangle(100, 200, 20, 50), 4)
