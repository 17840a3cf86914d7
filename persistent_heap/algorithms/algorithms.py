from importlib import import_module
from pathlib import Path

from .Algorithm import Algorithm

algorithms: list[Algorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    module = import_module(f".{file.stem}", package="persistent_heap.algorithms.impl")
    algorithms.append(module.algorithm)
