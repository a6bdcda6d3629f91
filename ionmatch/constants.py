"""
Constants and default configurations for ionmatch
"""

# Physical constants
PROTON_MASS = 1.00727646688
WATER_MASS = 18.010564684
AMMONIA_MASS = 17.026549101
CARBON_MONOXIDE_MASS = 27.994914620
PPM = 1.0 / 1000000.0

# Fragment ion subtypes
A_ION = 0
B_ION = 1
C_ION = 2
X_ION = 3
Y_ION = 4
Z_ION = 5

FRAGMENT_ION_SUBTYPES = {
    A_ION: "a",
    B_ION: "b",
    C_ION: "c",
    X_ION: "x",
    Y_ION: "y",
    Z_ION: "z",
}

# Ion series: (forward subtype, complementary subtype)
ION_SERIES = {
    "by": (B_ION, Y_ION),
    "cz": (C_ION, Z_ION),
    "ax": (A_ION, X_ION),
}

# Neutral losses: name -> empirical formula
NEUTRAL_LOSS_FORMULAS = {
    "H2O": "H2O",
    "NH3": "NH3",
    "H3PO4": "H3PO4",
    "HPO3": "HPO3",
    "CH4OS": "CH4OS",
}

# TMT 6-plex reporter ions, m/z at charge 1
TMT_6PLEX_MZ = {
    "TMT126": 126.127726,
    "TMT127": 127.124761,
    "TMT128": 128.134436,
    "TMT129": 129.131471,
    "TMT130": 130.141145,
    "TMT131": 131.138180,
}

# Default configuration
DEFAULT_CONFIG = {
    # Fragment matching
    "fragment_mass_tolerance": 0.02,
    "fragment_error_units": "Da",
    "min_mz": 0.0,
    "ion_series": "by",
    # Precursor matching
    "precursor_error_units": "ppm",
    "min_isotope": 0,
    "max_isotope": 1,
}

# Immonium ion subtypes, indexed by residue
IMMONIUM_RESIDUES = "ACDEFGHIKLMNPQRSTVWY"
IMMONIUM_ION_SUBTYPES = {residue: index for index, residue in enumerate(IMMONIUM_RESIDUES)}
