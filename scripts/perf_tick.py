"""
Multi-size performance check for the tick and the compositor.

Runs update_aquarium and render_aquarium_to_string on several grid sizes
and fish counts and reports median/p90 per call.
"""

# Pin threading for stable measurement
import os
os.environ.update({
    'OPENBLAS_NUM_THREADS': '1',
    'MKL_NUM_THREADS': '1',
    'NUMEXPR_NUM_THREADS': '1',
    'OMP_NUM_THREADS': '1'
})

import gc
import sys
import time
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from asciiquarium.assets import get_fish_assets
from asciiquarium.data_types import AquariumState
from asciiquarium.render import render_aquarium_to_string
from asciiquarium.spawning import seed_fish
from asciiquarium.simulation import update_aquarium

# Frame budget at 30 ticks per second
FRAME_BUDGET_MS = 1000.0 / 30.0


def build_state(size, fish_count: int, seed: int = 42) -> AquariumState:
    state = AquariumState(size=size)
    seed_fish(state, get_fish_assets(), fish_count, seed)
    return state


def run_perf_test(size, fish_count: int, ticks: int = 300) -> dict:
    """
    Time tick and render at one grid size.

    Args:
        size: Grid (width, height)
        fish_count: NORMAL fish to seed
        ticks: Measured ticks (each followed by one render)

    Returns:
        Dict with p50/p90 for tick and render, and final entity counts
    """
    assets = get_fish_assets()
    state = build_state(size, fish_count)

    # Warmup through the first creature and school spawns
    for _ in range(700):
        update_aquarium(state, assets)

    gc.collect()
    gc.disable()

    tick_ns = []
    render_ns = []
    try:
        for _ in range(ticks):
            start = time.perf_counter_ns()
            update_aquarium(state, assets)
            tick_ns.append(time.perf_counter_ns() - start)

            start = time.perf_counter_ns()
            render_aquarium_to_string(state, assets)
            render_ns.append(time.perf_counter_ns() - start)
    finally:
        gc.enable()

    tick_ms = np.array(tick_ns) / 1_000_000
    render_ms = np.array(render_ns) / 1_000_000

    return {
        'size': size,
        'fish_count': fish_count,
        'tick_p50_ms': np.percentile(tick_ms, 50),
        'tick_p90_ms': np.percentile(tick_ms, 90),
        'render_p50_ms': np.percentile(render_ms, 50),
        'render_p90_ms': np.percentile(render_ms, 90),
        'fishes': len(state.fishes),
        'bubbles': len(state.bubbles),
    }


def main():
    print("=" * 80)
    print("Tick / Render Performance")
    print("=" * 80)
    print()

    cases = [((80, 24), 6), ((160, 48), 20), ((240, 70), 60)]
    results = []

    for size, fish_count in cases:
        print(f"[{size[0]}x{size[1]}, {fish_count} fish]")
        result = run_perf_test(size, fish_count)

        print(f"  tick   p50: {result['tick_p50_ms']:.3f}ms  p90: {result['tick_p90_ms']:.3f}ms")
        print(f"  render p50: {result['render_p50_ms']:.3f}ms  p90: {result['render_p90_ms']:.3f}ms")

        total = result['tick_p50_ms'] + result['render_p50_ms']
        if total >= FRAME_BUDGET_MS:
            print(f"  WARNING: {total:.3f}ms per frame exceeds {FRAME_BUDGET_MS:.1f}ms budget!")
        else:
            headroom_pct = ((FRAME_BUDGET_MS - total) / FRAME_BUDGET_MS) * 100
            print(f"  PASS: {headroom_pct:.1f}% headroom under frame budget")

        results.append(result)
        print()

    print("=" * 80)
    print("Summary Table")
    print("=" * 80)
    print()
    print("| Grid     | Fish | Tick p50 | Render p50 | Bubbles |")
    print("|----------|------|----------|------------|---------|")
    for r in results:
        grid = f"{r['size'][0]}x{r['size'][1]}"
        print(f"| {grid:8s} | {r['fishes']:4d} | {r['tick_p50_ms']:8.3f} | {r['render_p50_ms']:10.3f} | {r['bubbles']:7d} |")

    print()
    print("=" * 80)


if __name__ == '__main__':
    main()
