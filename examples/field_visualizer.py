from electro_sim import Charge, total_field
from electro_sim.sampling import FieldGrid
from electro_sim.units import format_with_unit

# Dipole in a 400 x 300 display region (positions in display units)
charges = [
    Charge("1", (-80.0, 0.0, 0.0), +1e-6),
    Charge("2", (+80.0, 0.0, 0.0), -1e-6),
]

grid = FieldGrid.from_env(width=400.0, height=300.0)
arrows = grid.sample(charges)
print(f"{len(arrows)} arrows ({grid.grid_size**2 - len(arrows)} suppressed near charges)")
for e in arrows[:5]:
    print(f"  at ({e.position.x:7.1f}, {e.position.y:7.1f})  "
          f"{format_with_unit(e.magnitude, 'N/C')}  {e.angle_degrees:6.1f} deg")

probe = total_field(charges, (0.0, 50.0, 0.0))
print("probe", format_with_unit(probe.magnitude, "N/C"), f"{probe.angle_degrees:.1f} deg")
