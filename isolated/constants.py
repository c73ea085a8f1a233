"""Physical constants and simulation parameters."""

# Physical constants
STEFAN_BOLTZMANN = 5.670374419e-8  # W/(m^2 K^4)
BOLTZMANN_K = 1.380649e-23  # J/K
AVOGADRO = 6.02214076e23  # 1/mol
GAS_CONSTANT = 8.314462618  # J/(mol K)
GRAVITY = 9.81  # m/s^2

# Temperature references (K)
ABSOLUTE_ZERO = 0.0
WATER_FREEZE = 273.15
WATER_BOIL = 373.15
ROOM_TEMP = 293.15

# Pressure
ATM_PRESSURE = 101325.0  # Pa
ATM_PRESSURE_MMHG = 760.0  # mmHg

# Gas molecular weights (g/mol)
MW_O2 = 32.0
MW_N2 = 28.0
MW_CO2 = 44.0
MW_H2O = 18.0
MW_AIR = 28.97

# Biology
HEMOGLOBIN_NORMAL = 14.0  # g/dL
P50_BASE_MMHG = 26.6  # mmHg, O2 half-saturation
BODY_TEMP_NORMAL = 310.15  # K
HILL_COEFFICIENT = 2.7

# Lattice Boltzmann
CS2 = 1.0 / 3.0  # speed of sound squared
CS = 0.5773502691896257  # sqrt(1/3)