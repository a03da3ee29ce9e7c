import os

# Capacidad por defecto de cada nodo antes de subdividir
DEFAULT_CAPACITY = 4

# Tamaños usados por benchmark_quadtree cuando no se indican otros
DEFAULT_BENCHMARK_SIZES = (100, 1000, 10000)
DEFAULT_SEED = 12345

LOGGER_NAME = "quadtree"
LOG_LEVEL = os.environ.get("QUADTREE_LOG_LEVEL", "WARNING").upper()
