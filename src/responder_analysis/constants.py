"""Project-wide constants."""

# -- Responder classification ------------------------------------------------
# A patient responds when seizures drop by at least half from baseline.
RESPONDER_THRESHOLD: float = 0.5

# -- Zinc status ---------------------------------------------------------------
ZINC_DEFICIENCY_CUTOFF: float = 80.0  # µg/dL, serum zinc below this is deficient

# -- Outcome assembly ----------------------------------------------------------
MIN_SEIZURE_LOGS: int = 2  # baseline and latest must be distinct entries

# -- Rank-sum test -------------------------------------------------------------
MIN_GROUP_SIZE: int = 2

# Abramowitz & Stegun 7.1.26 erf approximation, |error| <= 1.5e-7
AS_A1: float = 0.254829592
AS_A2: float = -0.284496736
AS_A3: float = 1.421413741
AS_A4: float = -1.453152027
AS_A5: float = 1.061405429
AS_P: float = 0.3275911
