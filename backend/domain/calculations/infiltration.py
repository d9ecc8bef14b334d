"""
Infiltration conversions and annual infiltration loads
Blower door ACH50 to natural ACH, and the sensible degree-day load
"""

DEFAULT_ACH50_TO_NAT_FACTOR = 0.07

# 1.08 BTU/(hr·CFM·°F) × (1/60 CFM per ACH·ft³) × 24 hr/day
INFILTRATION_LOAD_FACTOR = 0.432


def ach50_to_achnat(ach50: float, factor: float = DEFAULT_ACH50_TO_NAT_FACTOR) -> float:
    """
    Convert blower door ACH50 to natural air changes per hour

    Args:
        ach50: Air changes per hour at 50 Pa
        factor: Linear conversion factor, user adjustable

    Returns:
        Natural ACH
    """
    return ach50 * factor


def infiltration_load_btu(ach_natural: float, volume: float, degree_days: float) -> float:
    """
    Annual sensible infiltration load

    Q = 0.432 × ACHnat × volume × DD   [BTU/yr]
    """
    return INFILTRATION_LOAD_FACTOR * ach_natural * volume * degree_days
