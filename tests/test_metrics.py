import pytest

from quadtree import Point, QuadTree, Rectangle
from quadtree.trees import metrics
from quadtree.trees.metrics import analyze_quadtree_instance, benchmark_quadtree, tree_stats


@pytest.fixture
def divided_tree():
    qt = QuadTree(Rectangle(0, 0, 8, 8), 2)
    for p in [Point(-1, -1), Point(1, 1), Point(2, 2), Point(-3, 3)]:
        qt.insert(p)
    return qt


def test_stats_of_empty_tree():
    stats = tree_stats(QuadTree(Rectangle(0, 0, 1, 1), 4))
    assert stats == {'nodes': 1, 'leaves': 1, 'depth': 0, 'total_points': 0, 'points_per_node': [0]}


def test_stats_of_divided_tree(divided_tree):
    stats = tree_stats(divided_tree)
    assert stats['nodes'] == 5
    assert stats['leaves'] == 4
    assert stats['depth'] == 1
    assert stats['total_points'] == 4
    # preorden: raíz, NW, NE, SW, SE
    assert stats['points_per_node'] == [2, 0, 0, 1, 1]


def test_analyze_instance(divided_tree):
    result = analyze_quadtree_instance(divided_tree)
    assert result['sizes'] == [4]
    assert result['num_nodes'] == [5]
    assert result['depths'] == [1]
    assert result['avg_occupancies'] == [pytest.approx(4 / 5)]
    assert result['load_factors'] == [pytest.approx(4 / 5 / 2)]
    assert len(result['times']) == 1
    assert len(result['mem_peaks']) == 1


def test_benchmark_inserts_every_point():
    result = benchmark_quadtree([10, 200], capacity=4)
    assert result['sizes'] == [10, 200]
    assert result['rejected'] == [0, 0]
    assert len(result['times']) == 2
    assert result['num_nodes'][0] <= result['num_nodes'][1]
    assert all(0 < lf <= 1 for lf in result['load_factors'])


def test_benchmark_is_reproducible():
    a = benchmark_quadtree([300], capacity=3, seed=7)
    b = benchmark_quadtree([300], capacity=3, seed=7)
    assert a['num_nodes'] == b['num_nodes']
    assert a['depths'] == b['depths']


def test_benchmark_custom_boundary():
    result = benchmark_quadtree([50], boundary=Rectangle(100, 200, 20, 50))
    assert result['rejected'] == [0]


def test_benchmark_propagates_capacity_errors():
    with pytest.raises(ValueError, match="capacity must be greater than 0"):
        benchmark_quadtree([5], capacity=0)


def test_benchmark_default_sizes(monkeypatch):
    monkeypatch.setattr(metrics, "DEFAULT_BENCHMARK_SIZES", (10,))
    result = benchmark_quadtree()
    assert result['sizes'] == [10]
    assert result['rejected'] == [0]
