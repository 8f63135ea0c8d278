import os
import sys
import time
from statistics import mean, pstdev

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from cavegen.dungeon import Dungeon  # noqa: E402 import after path fix

SEEDS = [11, 222, 3333, 4444, 55555, 67890, 72223, 88888, 99999, 123456]
SIZE = (128, 128)


def run():
    runtimes = []
    for s in SEEDS:
        t0 = time.perf_counter()
        d = Dungeon(seed=s, size=SIZE)
        t1 = time.perf_counter()
        rt = (t1 - t0) * 1000
        phases = " ".join(f"{k}={v:.1f}" for k, v in d.metrics["phase_ms"].items())
        print(f"seed={s} ms={rt:.1f} regions={d.metrics['regions_initial']} {phases}")
        runtimes.append(rt)
    print("\nSummary:")
    print(
        f"count={len(runtimes)} avg_ms={mean(runtimes):.1f} sd_ms={pstdev(runtimes):.1f} min_ms={min(runtimes):.1f} max_ms={max(runtimes):.1f}"
    )


if __name__ == "__main__":
    run()
