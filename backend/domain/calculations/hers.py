"""
Estimated HERS Index
Index = 100 × (rated site energy / reference site energy), where both
sides include the same non-envelope "other" energy.

100 is parity with the reference house, lower is better. The result is
not bounded below by zero.
"""

import logging

logger = logging.getLogger(__name__)

PARITY_INDEX = 100.0


def estimate_hers_index(
    rated_kwh_heat: float,
    rated_kwh_cool: float,
    ref_kwh_heat: float,
    ref_kwh_cool: float,
    other_kwh: float,
) -> float:
    """
    Args:
        rated_kwh_heat: Rated house heating kWh
        rated_kwh_cool: Rated house cooling kWh
        ref_kwh_heat: Reference house heating kWh
        ref_kwh_cool: Reference house cooling kWh
        other_kwh: DHW/lighting/appliance kWh added to both sides

    Returns:
        Index value; 100 when the reference total is not positive
    """
    rated = rated_kwh_heat + rated_kwh_cool + other_kwh
    reference = ref_kwh_heat + ref_kwh_cool + other_kwh
    if reference <= 0:
        # Degenerate input, the ratio is undefined
        logger.debug(f"Reference site energy {reference} <= 0, returning {PARITY_INDEX}")
        return PARITY_INDEX
    return PARITY_INDEX * (rated / reference)
