from py_quantities import QuantityValue, Distance, Velocity, Time, PreferredUnits, loadImperialUnits

# ship travel
leg = QuantityValue.parse('12,500 km')
speed = Velocity.KMH(27_000)
hours = leg.base_value() / speed.base_value() / Time.Hour.conversion_factor
print(f"{leg.as_string(0)} at {speed} takes {Time.Hour(hours).as_string(1)}")

# jump drive range check
jump = Distance.AstronomicalUnit(1.5)
reach = Distance.LightYear(0.00002)
print(f"{jump} {'<' if jump < reach else '>='} {reach.as_string(5)}")

# same value in the configured unit system
loadImperialUnits()
print(leg.in_preferred().as_string(0), PreferredUnits.distance)
