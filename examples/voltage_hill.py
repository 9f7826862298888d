import numpy as np

from electro_sim import Charge
from electro_sim.core import potential_grid, equipotential_radius, potential_energy_at
from electro_sim.units import format_with_unit

source = Charge("1", (0.0, 0.0, 0.0), 5e-6, fixed=True)

xs = np.linspace(-2.0, 2.0, 9)
ys = np.linspace(-2.0, 2.0, 9)
v = potential_grid([source], xs, ys)
print("V range", format_with_unit(v.min(), "V"), "..", format_with_unit(v.max(), "V"))

for level in [1e4, 2e4, 5e4, 1e5]:
    r = equipotential_radius(source.charge, level)
    print(f"equipotential {format_with_unit(level, 'V')} at r = {format_with_unit(r, 'm')}")

u = potential_energy_at([source], (0.5, 0.0, 0.0), 1e-9)
print("1 nC test charge at 0.5 m:", format_with_unit(u, "J"))
