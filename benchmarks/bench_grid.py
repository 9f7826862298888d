"""
Microbenchmark: field-grid sampling time vs number of charges and grid size.
Run:
  python benchmarks/bench_grid.py
"""
import numpy as np
from electro_sim.types import Charge
from electro_sim.sampling import FieldGrid
from electro_sim.profiler import Profiler


def run(n: int, grid_size: int, repeats: int = 50):
    prof = Profiler()
    rng = np.random.default_rng(12345)  # determinism
    charges = [
        Charge(str(i), (float(rng.uniform(-200, 200)), float(rng.uniform(-150, 150)), 0.0),
               float(rng.choice([-1.0, 1.0])) * 1e-6)
        for i in range(n)
    ]
    grid = FieldGrid(width=400.0, height=300.0, grid_size=grid_size)

    # warmup
    grid.sample(charges)

    for _ in range(repeats):
        with prof.section("sample"):
            grid.sample(charges)
    return prof.stats.summary()["sample"]


if __name__ == "__main__":
    for grid_size in [8, 16, 32]:
        for n in [1, 5, 20, 50]:
            s = run(n, grid_size)
            print(f"grid={grid_size:3d}  N={n:3d}  mean={s['mean_ms']:8.3f} ms  max={s['max_ms']:8.3f} ms")
        print()
