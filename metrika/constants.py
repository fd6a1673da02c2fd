"""
Physical Constants
==================

Fundamental physical and mathematical constants as plain floats, in SI units where a unit
applies. The grouped mappings are read-only views built once at import.
"""

import math
from types import MappingProxyType

# Mathematical
PI = math.pi
E = 2.718281828459045
GOLDEN_RATIO = 1.618033988749895

# Speed
SPEED_OF_LIGHT = 299_792_458.0  # m/s
SPEED_OF_SOUND = 343.0  # m/s, dry air at 20 °C

# Gravitation
GRAVITATIONAL_CONSTANT = 6.67430e-11  # m^3/(kg*s^2)
STANDARD_GRAVITY = 9.80665  # m/s^2

# Planck
PLANCK_CONSTANT = 6.62607015e-34  # J*s
REDUCED_PLANCK_CONSTANT = 1.054571817e-34  # J*s
PLANCK_LENGTH = 1.616255e-35  # m
PLANCK_TIME = 5.391247e-44  # s
PLANCK_MASS = 2.176434e-8  # kg
PLANCK_TEMPERATURE = 1.416784e32  # K

# Quantum and atomic
ELEMENTARY_CHARGE = 1.602176634e-19  # C
ELECTRON_MASS = 9.1093837015e-31  # kg
PROTON_MASS = 1.67262192369e-27  # kg
NEUTRON_MASS = 1.67492749804e-27  # kg
FINE_STRUCTURE_CONSTANT = 7.2973525693e-3
RYDBERG_CONSTANT = 10_973_731.568160  # 1/m

# Thermodynamic
AVOGADRO_CONSTANT = 6.02214076e23  # 1/mol
BOLTZMANN_CONSTANT = 1.380649e-23  # J/K
GAS_CONSTANT = 8.314462618  # J/(mol*K)
STEFAN_BOLTZMANN_CONSTANT = 5.670374419e-8  # W/(m^2*K^4)

# Electromagnetic
VACUUM_PERMITTIVITY = 8.8541878128e-12  # F/m
VACUUM_PERMEABILITY = 1.25663706212e-6  # H/m
MAGNETIC_FLUX_QUANTUM = 2.067833848e-15  # Wb

# Atomic units
BOHR_RADIUS = 5.29177210903e-11  # m
ATOMIC_MASS_UNIT = 1.66053906660e-27  # kg

# Energy
ELECTRON_VOLT = 1.602176634e-19  # J
CALORIE = 4.184  # J

# Astronomical
ASTRONOMICAL_UNIT = 1.495978707e11  # m
LIGHT_YEAR = 9.4607304725808e15  # m
PARSEC = 3.0856775814913673e16  # m
SOLAR_MASS = 1.98847e30  # kg
EARTH_MASS = 5.97237e24  # kg
EARTH_RADIUS = 6.371e6  # m, mean


MATHEMATICAL_CONSTANTS = MappingProxyType({
    "pi": PI,
    "e": E,
    "golden_ratio": GOLDEN_RATIO,
})

SPEED_CONSTANTS = MappingProxyType({
    "speed_of_light": SPEED_OF_LIGHT,
    "speed_of_sound": SPEED_OF_SOUND,
})

GRAVITATIONAL_CONSTANTS = MappingProxyType({
    "gravitational_constant": GRAVITATIONAL_CONSTANT,
    "standard_gravity": STANDARD_GRAVITY,
})

ALL_CONSTANTS = MappingProxyType({
    name.lower(): value
    for name, value in sorted(globals().items())
    if name.isupper() and isinstance(value, float)
})
