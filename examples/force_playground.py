from electro_sim import Charge, coulomb_force, total_force_on, format_with_unit
from electro_sim.core import potential_energy

# Two draggable charges 10 cm apart; opposite signs attract
a = Charge("a", (-0.05, 0.0, 0.0), +2e-6)
b = Charge("b", (+0.05, 0.0, 0.0), -3e-6)

f_ab = coulomb_force(a, b)
f_ba = coulomb_force(b, a)
print("F on a", f_ab.force, "|F|", format_with_unit(f_ab.magnitude, "N"))
print("F on b", f_ba.force, "|F|", format_with_unit(f_ba.magnitude, "N"))
print("U", format_with_unit(potential_energy(a, b), "J"))

# Drag b twice as far: force drops by 4
b = b.moved_to((0.15, 0.0, 0.0))
print("after drag |F|", format_with_unit(total_force_on(a, [a, b]).magnitude, "N"))
