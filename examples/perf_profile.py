"""Simple profiling of block construction and rendering."""

from __future__ import annotations

import timeit
import tracemalloc

from codespace import Block, IndentPolicy


def _build_chain(depth: int) -> Block:
    current: Block = Block().insert_line("leaf")
    for i in range(depth - 1):
        current = Block().insert_line(f"level {i} {{").insert_block(current).insert_line("}")
    return current


def _build_wide(width: int) -> Block:
    root: Block = Block()
    for i in range(width):
        root.insert_line(f"let x{i} = {i};")
    return root


def main() -> None:
    def _wide_construct() -> None:
        _build_wide(1000)

    duration: float = timeit.timeit(_wide_construct, number=100)
    print(f"Wide construction (1000 lines): {duration:.4f}s/100")

    wide: Block = _build_wide(1000)
    wide_render: float = timeit.timeit(lambda: wide.render(), number=100)
    print(f"Wide render (1000 lines): {wide_render:.4f}s/100")

    chain: Block = _build_chain(200)
    deep_render: float = timeit.timeit(lambda: chain.render(IndentPolicy.spaces(4)), number=100)
    print(f"Deep render (200 levels): {deep_render:.4f}s/100")

    tracemalloc.start()
    _build_chain(2000).render()
    current: int
    peak: int
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(f"Deep chain memory: current={current} bytes peak={peak} bytes")


if __name__ == "__main__":
    main()
