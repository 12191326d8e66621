"""Tests for the thermal conduction closure."""

import jax
jax.config.update("jax_enable_x64", True)

import jax.numpy as jnp
import pytest

from jax_tc.composition import ConstantMeanMolecularWeight, IonizedMeanMolecularWeight
from jax_tc.conduction import (
    ConductionCoefficients,
    ConductionParams,
    IsotropicConduction,
    MHDParallelOnly,
    PerpendicularConduction,
    PerpendicularRatio,
    ThermalConduction,
    compute_conduction_coefficients,
    floored_temperature,
)
from jax_tc.constants import KAPPA_SPITZER, SATURATION_PHI
from jax_tc.state import PrimitiveState
from jax_tc.units import UnitSystem


class TestReferenceScenarios:
    """Closed-form scenarios in dimensionless units."""

    def test_unit_inputs(self, unit_conduction):
        """rho = p = mu = kappa = 1 with no floor gives kappa_par = 1."""
        conduction = unit_conduction()
        coeffs = conduction.coefficients(PrimitiveState(rho=1.0, p=1.0))

        assert float(coeffs.kappa_par) == 1.0
        assert float(coeffs.kappa_perp) == 0.0
        assert float(coeffs.phi) == 0.3

    def test_below_transition_temperature(self, unit_conduction):
        """Raw T = 2 below floor 10 gives kappa_par = 10^2.5."""
        conduction = unit_conduction(transition_temperature=10.0)
        coeffs = conduction.coefficients(PrimitiveState(rho=1.0, p=2.0))

        assert float(coeffs.kappa_par) == pytest.approx(10.0**2.5, rel=1e-14)
        assert float(coeffs.kappa_par) == pytest.approx(316.2277660168379, rel=1e-14)

    def test_returns_named_tuple(self, unit_conduction):
        coeffs = unit_conduction().coefficients(PrimitiveState(rho=1.0, p=1.0))
        assert isinstance(coeffs, ConductionCoefficients)
        kappa_par, kappa_perp, phi = coeffs
        assert float(kappa_par) == 1.0


class TestTemperatureFloor:
    """Tests for the transition-temperature floor."""

    @pytest.mark.parametrize("pressure", [0.0, 1e-8, 0.5, 3.0, 10.0])
    def test_floor_independent_of_depth(self, unit_conduction, pressure):
        """Anything at or below the floor evaluates at the floor."""
        conduction = unit_conduction(kappa=2.0, transition_temperature=10.0)
        coeffs = conduction.coefficients(PrimitiveState(rho=1.0, p=pressure))

        expected = 2.0 * 10.0 * 10.0 * jnp.sqrt(10.0)
        assert float(coeffs.kappa_par) == pytest.approx(float(expected), rel=1e-14)

    def test_floor_comparison_is_exact(self):
        """Values just above the floor are not clamped."""
        T_floor = 10.0
        T = jnp.nextafter(jnp.float64(T_floor), jnp.float64(20.0))
        assert float(floored_temperature(T, T_floor)) == float(T)
        assert float(floored_temperature(jnp.float64(T_floor), T_floor)) == T_floor

    def test_floor_with_real_units(self):
        """Cold gas below the floor matches kappa * T_floor^2.5 * factor."""
        conduction = ThermalConduction(
            params=ConductionParams(kappa=KAPPA_SPITZER, transition_temperature=1e5),
        )
        prim = PrimitiveState(rho=1.0, p=1e-6)
        mu = conduction.mean_molecular_weight(prim)
        assert float(conduction.temperature(prim)) < 1e5

        coeffs = conduction.coefficients(prim)
        expected = KAPPA_SPITZER * 1e5**2.5 * conduction.units.conductivity_factor(mu)
        assert float(coeffs.kappa_par) == pytest.approx(expected, rel=1e-12)


class TestParallelConductivity:
    """Tests for kappa_par above the floor."""

    def test_monotonic_in_pressure(self, unit_conduction):
        """Increasing pressure at fixed density strictly increases kappa_par."""
        conduction = unit_conduction(transition_temperature=1.0)
        p = jnp.linspace(1.5, 50.0, 40)
        coeffs = conduction.coefficients(PrimitiveState(rho=jnp.ones_like(p), p=p))

        assert jnp.all(jnp.diff(coeffs.kappa_par) > 0)

    def test_spitzer_scaling(self, unit_conduction):
        """kappa_par scales as T^(5/2) above the floor."""
        conduction = unit_conduction()
        k1 = conduction.coefficients(PrimitiveState(rho=1.0, p=1.0)).kappa_par
        k4 = conduction.coefficients(PrimitiveState(rho=1.0, p=4.0)).kappa_par

        assert float(k4 / k1) == pytest.approx(32.0, rel=1e-14)

    def test_unit_scaling_factor(self):
        """Final / raw coefficient equals m_p mu / (rho0 v0 L0 k_B)."""
        units = UnitSystem()
        mu_model = IonizedMeanMolecularWeight()
        conduction = ThermalConduction(
            params=ConductionParams(kappa=KAPPA_SPITZER, transition_temperature=1e4),
            units=units,
            mean_molecular_weight=mu_model,
        )
        prim = PrimitiveState(rho=2.0, p=1e4)
        mu = mu_model(prim)

        raw = conduction.physical_kappa_parallel(conduction.temperature(prim))
        final = conduction.coefficients(prim).kappa_par
        expected = units.proton_mass * mu / (
            units.unit_density * units.unit_velocity * units.unit_length * units.boltzmann
        )

        assert float(final / raw) == pytest.approx(expected, rel=1e-12)

    def test_coordinates_do_not_matter(self, unit_conduction):
        conduction = unit_conduction()
        prim = PrimitiveState(rho=1.0, p=3.0)
        a = conduction.coefficients(prim, 0.0, 0.0, 0.0)
        b = conduction.coefficients(prim, 5.0, -1.0, 2.5)
        assert float(a.kappa_par) == float(b.kappa_par)

    def test_zero_density_is_not_finite(self, unit_conduction):
        """Invalid input propagates as a non-finite result, no exception."""
        coeffs = unit_conduction().coefficients(PrimitiveState(rho=0.0, p=1.0))
        assert not jnp.isfinite(coeffs.kappa_par)


class TestPerpendicularConductivity:
    """Tests for the physics-module strategies."""

    @pytest.mark.parametrize("pressure", [0.0, 0.1, 1.0, 1e6])
    def test_mhd_perpendicular_is_zero(self, unit_conduction, pressure):
        conduction = unit_conduction(transition_temperature=0.5)
        coeffs = conduction.coefficients(PrimitiveState(rho=1.0, p=pressure, Bx=1.0))
        assert float(coeffs.kappa_perp) == 0.0

    def test_hd_is_isotropic(self, unit_conduction):
        conduction = unit_conduction(perpendicular=IsotropicConduction())
        coeffs = conduction.coefficients(PrimitiveState(rho=1.0, p=3.0))
        assert float(coeffs.kappa_perp) == float(coeffs.kappa_par)

    def test_ratio(self, unit_conduction):
        conduction = unit_conduction(perpendicular=PerpendicularRatio(ratio=1e-6))
        coeffs = conduction.coefficients(PrimitiveState(rho=1.0, p=3.0))
        assert float(coeffs.kappa_perp / coeffs.kappa_par) == pytest.approx(1e-6)

    def test_create(self):
        assert isinstance(PerpendicularConduction.create("mhd"), MHDParallelOnly)
        assert isinstance(PerpendicularConduction.create("hd"), IsotropicConduction)
        ratio = PerpendicularConduction.create("mhd_ratio", ratio=0.1)
        assert ratio == PerpendicularRatio(ratio=0.1)

    def test_create_unknown(self):
        with pytest.raises(ValueError, match="Unknown physics module"):
            PerpendicularConduction.create("rhd")


class TestSaturationParameter:

    @pytest.mark.parametrize("rho,p", [(1.0, 1.0), (1e-3, 1e5), (10.0, 0.0)])
    def test_phi_default(self, unit_conduction, rho, p):
        coeffs = unit_conduction().coefficients(PrimitiveState(rho=rho, p=p))
        assert float(coeffs.phi) == SATURATION_PHI == 0.3

    def test_phi_from_params(self):
        conduction = ThermalConduction(
            params=ConductionParams(kappa=1.0, transition_temperature=0.0, phi=1e10),
            units=UnitSystem.dimensionless(),
            mean_molecular_weight=ConstantMeanMolecularWeight(mu=1.0),
        )
        assert float(conduction.coefficients(PrimitiveState(rho=1.0, p=1.0)).phi) == 1e10


class TestArrayEvaluation:
    """Grid-shaped, jitted and vmapped evaluation agree with single cells."""

    def test_grid_matches_cells(self, unit_conduction):
        conduction = unit_conduction(transition_temperature=2.0)
        rho = jnp.linspace(0.5, 2.0, 12).reshape(3, 4)
        p = jnp.linspace(0.1, 20.0, 12).reshape(3, 4)

        grid = conduction.coefficients(PrimitiveState(rho=rho, p=p))
        assert grid.kappa_par.shape == (3, 4)
        assert grid.kappa_perp.shape == (3, 4)

        for i in range(3):
            for j in range(4):
                cell = conduction.coefficients(
                    PrimitiveState(rho=float(rho[i, j]), p=float(p[i, j]))
                )
                assert float(grid.kappa_par[i, j]) == pytest.approx(
                    float(cell.kappa_par), rel=1e-14
                )

    def test_vmap(self, unit_conduction):
        conduction = unit_conduction()
        rho = jnp.ones(8)
        p = jnp.linspace(1.0, 8.0, 8)

        batched = jax.vmap(
            lambda r, q: conduction.coefficients(PrimitiveState(rho=r, p=q)).kappa_par
        )(rho, p)

        assert jnp.allclose(batched, p**2.5, rtol=1e-14)

    def test_plain_function_matches_method(self, unit_conduction):
        conduction = unit_conduction(kappa=3.0, transition_temperature=1.5)
        prim = PrimitiveState(rho=2.0, p=7.0)
        direct = compute_conduction_coefficients(
            prim, 0.0, 0.0, 0.0,
            conduction.params,
            conduction.units,
            conduction.mean_molecular_weight,
            conduction.perpendicular,
        )
        jitted = conduction.coefficients(prim)
        assert float(direct.kappa_par) == pytest.approx(float(jitted.kappa_par), rel=1e-14)

    def test_closure_is_hashable(self, unit_conduction):
        assert hash(unit_conduction()) == hash(unit_conduction())
