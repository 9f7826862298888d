from electro_sim import Capacitor
from electro_sim.units import format_with_unit

cap = Capacitor.default()
for step in [cap, cap.with_distance(0.002), cap.with_dielectric(4.0), cap.with_voltage(250.0)]:
    print(
        f"A={step.area} m²  d={format_with_unit(step.distance, 'm')}  εr={step.dielectric}  "
        f"V={format_with_unit(step.voltage, 'V')}  ->  "
        f"C={format_with_unit(step.capacitance, 'F')}  "
        f"Q={format_with_unit(step.charge, 'C')}  "
        f"U={format_with_unit(step.energy, 'J')}  "
        f"E={format_with_unit(step.field_strength, 'V/m')}"
    )
