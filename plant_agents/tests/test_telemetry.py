"""
Tests for the telemetry simulator.

Tests verify:
- Every channel has 10 samples within baseline ± range/2
- Channel means stay within the same bounds
- calculate_metrics is pure and follows the efficiency formulas
- Compliance mappings (PASS/WARNING/FAIL, VALID/REVIEW_REQUIRED)
- ManufacturingDataSimulator stamps plant/line ids
"""

import random
from datetime import date

import pytest

from plant_agents.models import (
    CertificationStatus,
    EnvironmentalStatus,
    PlantSnapshot,
    SafetyAuditStatus,
    SensorReading,
)
from plant_agents.telemetry import (
    SAMPLES_PER_CHANNEL,
    SENSOR_CHANNELS,
    ManufacturingDataSimulator,
    calculate_metrics,
    efficiency_score,
    generate_sensor_data,
)


INSPECTION_DATE = date(2025, 3, 14)


def _reading(temperature=185.5, pressure=2.1, vibration=0.0, energy=85.0, n=5) -> SensorReading:
    """Build a reading with constant channels."""
    return SensorReading(
        temperature=[temperature] * n,
        pressure=[pressure] * n,
        vibration=[vibration] * n,
        energy_consumption=[energy] * n,
    )


class TestGenerateSensorData:
    """Test synthetic sensor sample generation."""

    def test_all_channels_have_ten_samples(self):
        """Verify each of the six channels carries SAMPLES_PER_CHANNEL samples."""
        reading = generate_sensor_data(random.Random(1))
        assert SAMPLES_PER_CHANNEL == 10
        for name in SENSOR_CHANNELS:
            assert len(getattr(reading, name)) == SAMPLES_PER_CHANNEL, name

    @pytest.mark.parametrize("seed", range(20))
    def test_samples_within_jitter_band(self, seed):
        """Verify every sample lies in [baseline - range/2, baseline + range/2]."""
        reading = generate_sensor_data(random.Random(seed))
        for name, (baseline, spread) in SENSOR_CHANNELS.items():
            for value in getattr(reading, name):
                assert baseline - spread / 2 - 1e-9 <= value <= baseline + spread / 2 + 1e-9

    @pytest.mark.parametrize("seed", range(20))
    def test_channel_means_within_jitter_band(self, seed):
        """Verify each channel mean lies within baseline ± range/2."""
        reading = generate_sensor_data(random.Random(seed))
        for name, (baseline, spread) in SENSOR_CHANNELS.items():
            values = getattr(reading, name)
            mean = sum(values) / len(values)
            assert baseline - spread / 2 - 1e-9 <= mean <= baseline + spread / 2 + 1e-9

    def test_seeded_rng_is_reproducible(self):
        """Verify the same seed yields the same reading."""
        assert generate_sensor_data(random.Random(42)) == generate_sensor_data(random.Random(42))

    def test_extreme_draws_hit_band_edges(self):
        """Verify uniform draws of 0 and 0.5 map to the lower edge and the baseline."""
        class FixedRandom:
            def __init__(self, value):
                self.value = value

            def random(self):
                return self.value

        low = generate_sensor_data(FixedRandom(0.0))
        mid = generate_sensor_data(FixedRandom(0.5))
        assert low.temperature[0] == pytest.approx(183.5)
        assert mid.temperature[0] == pytest.approx(185.5)
        assert low.air_quality[0] == pytest.approx(77.5)


class TestEfficiencyScore:
    """Test per-metric efficiency sub-scores."""

    def test_at_optimum_is_100(self):
        assert efficiency_score(185.5, 185.5, 10) == 100.0

    def test_deviation_is_symmetric(self):
        """Verify deviations above and below the optimum score the same."""
        assert efficiency_score(186.5, 185.5, 10) == pytest.approx(90.0)
        assert efficiency_score(184.5, 185.5, 10) == pytest.approx(90.0)

    def test_floored_at_zero(self):
        assert efficiency_score(200.0, 185.5, 10) == 0.0


class TestCalculateMetrics:
    """Test derived production, quality and compliance metrics."""

    def test_returns_three_sections(self):
        metrics = calculate_metrics(_reading(), INSPECTION_DATE)
        assert set(metrics.keys()) == {"current_production", "quality_metrics", "compliance_status"}

    def test_means_pass_through(self):
        """Verify production means equal channel means."""
        reading = SensorReading(
            temperature=[183, 184, 185, 186, 187],
            pressure=[2.0, 2.2],
            vibration=[0.7, 0.9],
            energy_consumption=[80.0, 90.0],
        )
        production = calculate_metrics(reading, INSPECTION_DATE)["current_production"]
        assert production.temperature == pytest.approx(185.0)
        assert production.pressure == pytest.approx(2.1)
        assert production.vibration == pytest.approx(0.8)
        assert production.energy_consumption == pytest.approx(85.0)

    def test_efficiency_is_average_of_sub_scores(self):
        """Verify composite efficiency from known sub-scores.

        temperature 186.5 -> 90, pressure 2.1 -> 100, vibration 0.8 -> 60, energy 85 -> 100
        """
        reading = _reading(temperature=186.5, vibration=0.8)
        production = calculate_metrics(reading, INSPECTION_DATE)["current_production"]
        assert production.efficiency == pytest.approx(87.5)

    def test_nominal_derived_figures(self):
        """Verify figures at the reference efficiency of 85."""
        # temperature 100, pressure 100, vibration 40 (1.2 * 50 = 60 penalty), energy 100
        reading = _reading(vibration=1.2)
        metrics = calculate_metrics(reading, INSPECTION_DATE)
        production = metrics["current_production"]
        quality = metrics["quality_metrics"]

        assert production.efficiency == pytest.approx(85.0)
        assert production.units_per_hour == pytest.approx(150.0)
        assert production.quality_score == pytest.approx(98.5)
        assert quality.defect_rate == pytest.approx(1.5)
        assert quality.customer_returns == pytest.approx(0.3)
        assert quality.on_time_delivery == pytest.approx(98.2)

    def test_perfect_line_figures(self):
        """Verify derived figures at efficiency 100; quality score reaches its cap."""
        metrics = calculate_metrics(_reading(), INSPECTION_DATE)
        production = metrics["current_production"]
        quality = metrics["quality_metrics"]

        assert production.efficiency == pytest.approx(100.0)
        assert production.units_per_hour == pytest.approx(180.0)
        assert production.quality_score == pytest.approx(100.0)
        assert production.quality_score <= 100.0
        assert quality.on_time_delivery == pytest.approx(98.95)
        assert quality.defect_rate == pytest.approx(1.2)

    def test_figures_on_failing_line(self):
        """Verify defect rate and returns rise when every sub-score is 0."""
        # every sub-score 0 -> efficiency 0 -> defect rate 3.2, returns 0.725
        reading = _reading(temperature=300.0, pressure=10.0, vibration=5.0, energy=200.0)
        quality = calculate_metrics(reading, INSPECTION_DATE)["quality_metrics"]
        assert quality.defect_rate == pytest.approx(3.2)
        assert quality.customer_returns == pytest.approx(0.725)

    def test_is_pure(self):
        """Verify identical input yields identical output and the input is untouched."""
        reading = generate_sensor_data(random.Random(7))
        before = reading.model_copy(deep=True)

        first = calculate_metrics(reading, INSPECTION_DATE)
        second = calculate_metrics(reading, INSPECTION_DATE)

        assert first == second
        assert reading == before

    def test_last_inspection_defaults_to_today(self):
        compliance = calculate_metrics(_reading())["compliance_status"]
        assert compliance.last_inspection == date.today().isoformat()

    def test_last_inspection_uses_given_date(self):
        compliance = calculate_metrics(_reading(), INSPECTION_DATE)["compliance_status"]
        assert compliance.last_inspection == "2025-03-14"


class TestComplianceMapping:
    """Test threshold-to-enum mappings."""

    @pytest.mark.parametrize(
        "vibration,expected",
        [
            (0.0, SafetyAuditStatus.PASS),       # efficiency 100
            (1.2, SafetyAuditStatus.WARNING),    # efficiency 85
            (2.0, SafetyAuditStatus.FAIL),       # efficiency 75
        ],
    )
    def test_safety_audit(self, vibration, expected):
        compliance = calculate_metrics(_reading(vibration=vibration), INSPECTION_DATE)["compliance_status"]
        assert compliance.safety_audit == expected

    def test_quality_certification(self):
        """Verify efficiency below 85 requires review; above 85 is valid."""
        below = calculate_metrics(_reading(vibration=1.3), INSPECTION_DATE)["compliance_status"]
        above = calculate_metrics(_reading(vibration=1.0), INSPECTION_DATE)["compliance_status"]
        assert below.quality_certification == CertificationStatus.REVIEW_REQUIRED
        assert above.quality_certification == CertificationStatus.VALID

    def test_environmental_compliance(self):
        """Verify mean energy below 90 passes and 90 or more warns."""
        below = calculate_metrics(_reading(energy=89.9), INSPECTION_DATE)["compliance_status"]
        at = calculate_metrics(_reading(energy=90.0), INSPECTION_DATE)["compliance_status"]
        assert below.environmental_compliance == EnvironmentalStatus.PASS
        assert at.environmental_compliance == EnvironmentalStatus.WARNING


class TestManufacturingDataSimulator:
    """Test snapshot assembly."""

    def test_snapshot_uses_given_ids(self):
        simulator = ManufacturingDataSimulator(plant_id="PLANT_X", line_id="LINE_Z", rng=random.Random(3))
        snapshot = simulator.get_current_data()

        assert isinstance(snapshot, PlantSnapshot)
        assert snapshot.plant_id == "PLANT_X"
        assert snapshot.line_id == "LINE_Z"
        assert snapshot.timestamp
        assert snapshot.current_production.efficiency is not None

    def test_snapshot_ids_default_from_environment(self, monkeypatch):
        monkeypatch.setenv("MANUFACTURING_PLANT_ID", "PLANT_ENV")
        monkeypatch.setenv("PRODUCTION_LINE_ID", "LINE_ENV")
        snapshot = ManufacturingDataSimulator(rng=random.Random(3)).get_current_data()

        assert snapshot.plant_id == "PLANT_ENV"
        assert snapshot.line_id == "LINE_ENV"

    def test_metrics_match_sensor_data(self):
        """Verify snapshot metrics are derived from its own sensor data."""
        snapshot = ManufacturingDataSimulator(rng=random.Random(11)).get_current_data()
        expected = calculate_metrics(snapshot.sensor_data)
        assert snapshot.current_production == expected["current_production"]
        assert snapshot.quality_metrics == expected["quality_metrics"]

    def test_polls_are_independent(self):
        """Verify successive polls produce fresh readings."""
        simulator = ManufacturingDataSimulator(rng=random.Random(5))
        first = simulator.get_current_data()
        second = simulator.get_current_data()
        assert first.sensor_data != second.sensor_data
