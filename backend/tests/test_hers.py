"""
Tests for the estimated HERS index
"""

import math
import pytest

from domain.calculations.hers import estimate_hers_index
from domain.calculations.parallel_path import calc_whole_wall_r
from domain.calculations.whole_house import (
    calc_reference_whole_house_kwh,
    calc_whole_house_kwh,
)
from domain.core.models import HERSParams, RatedEnvelopeSpec


class TestHERSIndex:

    def test_ratio(self):
        assert estimate_hers_index(2000, 1000, 4000, 2000, 6000) == pytest.approx(100 * 9000 / 12000)

    def test_identical_inputs_give_100(self):
        assert estimate_hers_index(5000, 2000, 5000, 2000, 6000) == pytest.approx(100, rel=1e-6)

    def test_zero_reference_returns_exactly_100(self):
        index = estimate_hers_index(1000, 500, 0, 0, 0)
        assert index == 100
        assert math.isfinite(index)

    def test_negative_reference_returns_100(self):
        assert estimate_hers_index(1000, 500, -200, 0, 0) == 100

    def test_better_house_scores_lower(self):
        assert estimate_hers_index(3000, 1000, 6000, 2000, 6000) < 100

    def test_worse_house_scores_higher(self):
        assert estimate_hers_index(9000, 3000, 6000, 2000, 6000) > 100

    def test_can_go_negative(self):
        """Not bounded below by zero"""
        assert estimate_hers_index(-10000, 0, 5000, 1000, 1000) < 0


class TestHERSParity:

    def test_rated_equal_to_reference_spec(self, geometry, climate, hvac):
        """Rated envelope set to the reference values gives 100"""
        hers = HERSParams(rated=RatedEnvelopeSpec(window_u=0.40, ceiling_r=38.0))
        reference_spec = hers.reference
        wall_r = calc_whole_wall_r(reference_spec.wall_config(0.23)).effective_r

        rated = calc_whole_house_kwh(wall_r, reference_spec.ach50, geometry, climate, hvac, hers)
        reference = calc_reference_whole_house_kwh(wall_r, geometry, climate, hvac, hers)

        index = estimate_hers_index(
            rated.heating_kwh, rated.cooling_kwh,
            reference.heating_kwh, reference.cooling_kwh,
            hers.other_site_energy_kwh,
        )
        assert index == pytest.approx(100, rel=1e-6)
