import time
import tracemalloc
import gc

import numpy as np

from quadtree.config import DEFAULT_BENCHMARK_SIZES, DEFAULT_CAPACITY, DEFAULT_SEED
from quadtree.Nodes.Point import Point
from quadtree.Nodes.Rectangle import Rectangle
from quadtree.trees.Quad_tree import QuadTree
from quadtree.utils.loggers import get_logger

logger = get_logger("metrics")


def tree_stats(root):
    """Recorre el árbol en preorden (NW, NE, SW, SE).

    Retorna dict con: nodes, leaves, depth (raíz = 0), total_points y
    points_per_node.
    """
    points_per_node = []
    leaves = 0
    depth = 0

    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        points_per_node.append(len(node.points))
        depth = max(depth, level)
        if node.divided:
            # invertido para que la pila saque NW primero
            for child in reversed(node.children()):
                stack.append((child, level + 1))
        else:
            leaves += 1

    return {
        'nodes': len(points_per_node),
        'leaves': leaves,
        'depth': depth,
        'total_points': sum(points_per_node),
        'points_per_node': points_per_node
    }


def _occupancy(stats, capacity):
    # load factor: ocupación media / capacidad
    avg_occ = stats['total_points'] / stats['nodes'] if stats['nodes'] > 0 else 0
    lf = avg_occ / capacity if capacity > 0 else 0
    return avg_occ, lf


def analyze_quadtree_instance(tree: QuadTree):
    """Analiza un QuadTree existente y devuelve métricas similares a benchmark_quadtree para un único tamaño."""
    gc.collect()
    tracemalloc.start()
    start = time.perf_counter()

    stats = tree_stats(tree)

    elapsed = time.perf_counter() - start
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    avg_occ, lf = _occupancy(stats, tree.capacity)

    return {
        'sizes': [stats['total_points']],
        'times': [elapsed],
        'mem_peaks': [peak],
        'load_factors': [lf],
        'avg_occupancies': [avg_occ],
        'num_nodes': [stats['nodes']],
        'depths': [stats['depth']]
    }


def benchmark_quadtree(sizes=None, capacity=DEFAULT_CAPACITY, boundary=None, seed=DEFAULT_SEED):
    """Inserta puntos aleatorios uniformes dentro de boundary y devuelve métricas para cada tamaño.
    Retorna dict con listas: sizes, times, mem_peaks, load_factors, avg_occupancies, num_nodes, depths, rejected
    """
    if sizes is None:
        sizes = DEFAULT_BENCHMARK_SIZES
    if boundary is None:
        boundary = Rectangle(0.5, 0.5, 0.5, 0.5)

    sizes = list(sizes)
    rng = np.random.default_rng(seed)

    times = []
    mem_peaks = []
    load_factors = []
    avg_occupancies = []
    num_nodes = []
    depths = []
    rejected = []

    for n in sizes:
        xs = rng.uniform(boundary.x - boundary.w, boundary.x + boundary.w, n)
        ys = rng.uniform(boundary.y - boundary.h, boundary.y + boundary.h, n)
        points = [Point(float(x), float(y)) for x, y in zip(xs, ys)]

        gc.collect()
        tracemalloc.start()
        start = time.perf_counter()

        qt = QuadTree(boundary, capacity)
        misses = 0
        for p in points:
            if not qt.insert(p):
                misses += 1

        elapsed = time.perf_counter() - start
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        stats = tree_stats(qt)
        avg_occ, lf = _occupancy(stats, capacity)

        times.append(elapsed)
        mem_peaks.append(peak)
        load_factors.append(lf)
        avg_occupancies.append(avg_occ)
        num_nodes.append(stats['nodes'])
        depths.append(stats['depth'])
        rejected.append(misses)

        logger.info("n=%d nodes=%d depth=%d time=%.4fs", n, stats['nodes'], stats['depth'], elapsed)

    return {
        'sizes': sizes,
        'times': times,
        'mem_peaks': mem_peaks,
        'load_factors': load_factors,
        'avg_occupancies': avg_occupancies,
        'num_nodes': num_nodes,
        'depths': depths,
        'rejected': rejected
    }
