"""
Tests for cavity R and parallel-path whole-wall R
"""

import pytest
from dataclasses import replace

from domain.calculations.parallel_path import (
    calc_cavity_r,
    calc_common_layers_r,
    calc_whole_wall_r,
    thermal_bridging_penalty,
)
from domain.core.materials import InsulationKind, LAYER_R, R_PER_INCH, SheathingKind


class TestCavityR:
    """Cavity R from insulation kind and depth"""

    @pytest.mark.parametrize("kind,per_inch", [
        (InsulationKind.FIBERGLASS, 3.7),
        (InsulationKind.MINERAL_WOOL, 4.2),
        (InsulationKind.OPEN_CELL_FOAM, 3.6),
        (InsulationKind.CLOSED_CELL_FOAM, 6.5),
    ])
    def test_single_material(self, kind, per_inch):
        assert calc_cavity_r(5.5, kind) == pytest.approx(5.5 * per_inch)

    def test_accepts_catalog_keys(self):
        assert calc_cavity_r(3.5, "mineralwool") == calc_cavity_r(3.5, InsulationKind.MINERAL_WOOL)

    def test_unknown_kind_behaves_like_fiberglass(self):
        assert calc_cavity_r(3.5, "cellulose") == calc_cavity_r(3.5, InsulationKind.FIBERGLASS)
        assert calc_cavity_r(3.5, None) == calc_cavity_r(3.5, InsulationKind.FIBERGLASS)

    def test_flash_batt_composite(self):
        """First inch closed-cell foam, remainder fiberglass"""
        expected = 1.0 * R_PER_INCH["ccspf"] + 2.5 * R_PER_INCH["fiberglass"]
        assert calc_cavity_r(3.5, InsulationKind.FLASH_BATT) == pytest.approx(expected)

    def test_flash_batt_one_inch_is_pure_foam(self):
        assert calc_cavity_r(1.0, InsulationKind.FLASH_BATT) == R_PER_INCH["ccspf"]

    def test_flash_batt_shallow_cavity_keeps_full_foam_inch(self):
        """No negative batt term below one inch"""
        assert calc_cavity_r(0.5, InsulationKind.FLASH_BATT) == R_PER_INCH["ccspf"]


class TestWholeWallR:
    """Parallel-path combination"""

    def test_reference_2x4_values(self, wall_2x4_fiberglass):
        result = calc_whole_wall_r(wall_2x4_fiberglass)

        common = 0.68 + 0.17 + 0.45 + 0.6
        assert result.stud_path_r == pytest.approx(common + 0.62 + 3.5 * 1.25)
        assert result.cavity_path_r == pytest.approx(common + 0.62 + 3.5 * 3.7)
        assert result.effective_r == pytest.approx(12.03, abs=0.01)
        assert result.effective_u == pytest.approx(1.0 / result.effective_r)

    def test_common_layers_exclude_sheathing(self):
        assert calc_common_layers_r() == pytest.approx(
            LAYER_R["air_films"] + LAYER_R["drywall_half"] + LAYER_R["siding"]
        )

    def test_sheathing_counted_once_per_path(self, wall_2x4_fiberglass):
        """Swapping OSB for R-6 sheathing moves both paths by exactly 6 - 0.62"""
        osb = calc_whole_wall_r(wall_2x4_fiberglass)
        r6 = calc_whole_wall_r(replace(wall_2x4_fiberglass, exterior_sheathing=SheathingKind.INSULATED_R6))

        assert r6.stud_path_r - osb.stud_path_r == pytest.approx(6.0 - 0.62)
        assert r6.cavity_path_r - osb.cavity_path_r == pytest.approx(6.0 - 0.62)

    def test_taped_osb_matches_plain_osb(self, wall_2x4_fiberglass):
        plain = calc_whole_wall_r(wall_2x4_fiberglass)
        taped = calc_whole_wall_r(replace(wall_2x4_fiberglass, exterior_sheathing=SheathingKind.TAPED_OSB))
        assert taped == plain

    def test_thermal_break_adds_to_both_paths(self, wall_2x4_fiberglass):
        base = calc_whole_wall_r(wall_2x4_fiberglass)
        broken = calc_whole_wall_r(replace(wall_2x4_fiberglass, interior_thermal_break=True))

        assert broken.stud_path_r - base.stud_path_r == pytest.approx(3.0)
        assert broken.cavity_path_r - base.cavity_path_r == pytest.approx(3.0)
        assert broken.effective_r > base.effective_r

    @pytest.mark.parametrize("kind", list(InsulationKind))
    @pytest.mark.parametrize("fraction", [0.1, 0.23, 0.5])
    def test_effective_r_between_paths(self, wall_2x4_fiberglass, kind, fraction):
        wall = replace(
            wall_2x4_fiberglass,
            framing_depth_in=5.5,
            cavity_insulation=kind,
            exterior_sheathing=SheathingKind.INSULATED_R3,
            framing_fraction=fraction,
        )
        result = calc_whole_wall_r(wall)

        low = min(result.stud_path_r, result.cavity_path_r)
        high = max(result.stud_path_r, result.cavity_path_r)
        assert low < result.effective_r < high

    def test_2x6_beats_2x4(self, wall_2x4_fiberglass):
        r_2x4 = calc_whole_wall_r(wall_2x4_fiberglass).effective_r
        r_2x6 = calc_whole_wall_r(replace(wall_2x4_fiberglass, framing_depth_in=5.5)).effective_r
        assert r_2x6 > r_2x4

    def test_better_insulation_raises_effective_r(self, wall_2x4_fiberglass):
        ordered = [
            InsulationKind.OPEN_CELL_FOAM,
            InsulationKind.FIBERGLASS,
            InsulationKind.MINERAL_WOOL,
            InsulationKind.CLOSED_CELL_FOAM,
        ]
        values = [
            calc_whole_wall_r(replace(wall_2x4_fiberglass, cavity_insulation=k)).effective_r
            for k in ordered
        ]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_deterministic(self, wall_2x4_fiberglass):
        assert calc_whole_wall_r(wall_2x4_fiberglass) == calc_whole_wall_r(wall_2x4_fiberglass)

    def test_thermal_bridging_penalty_positive(self, wall_2x4_fiberglass):
        assert thermal_bridging_penalty(wall_2x4_fiberglass) > 0
