"""
Telemetry Simulation Module

Produces synthetic sensor readings for one production line and derives
production, quality and compliance metrics from them.

- generate_sensor_data(rng) -> SensorReading: baseline plus uniform jitter per channel
- calculate_metrics(sensor_data) -> dict: pure function over one reading
- ManufacturingDataSimulator.get_current_data() -> PlantSnapshot

The baselines, ranges and efficiency optima below are illustrative values,
not a calibrated physical model.
"""

import logging
import random
from datetime import date, datetime, timezone
from typing import Optional

from .config import get_line_id, get_plant_id
from .models import (
    CertificationStatus,
    ComplianceStatus,
    EnvironmentalStatus,
    PlantSnapshot,
    ProductionMetrics,
    QualityMetrics,
    SafetyAuditStatus,
    SensorReading,
)

logger = logging.getLogger(__name__)

SAMPLES_PER_CHANNEL = 10

# channel -> (baseline, range); samples land in [baseline - range/2, baseline + range/2)
SENSOR_CHANNELS: dict[str, tuple[float, float]] = {
    "temperature": (185.5, 4.0),
    "pressure": (2.1, 0.2),
    "vibration": (0.8, 0.3),
    "energy_consumption": (85.2, 5.0),
    "humidity": (45.0, 10.0),
    "air_quality": (85.0, 15.0),
}

# channel -> (optimum, penalty per unit of deviation)
EFFICIENCY_OPTIMA: dict[str, tuple[float, float]] = {
    "temperature": (185.5, 10.0),
    "pressure": (2.1, 50.0),
    "vibration": (0.0, 50.0),
    "energy_consumption": (85.0, 2.0),
}

REFERENCE_EFFICIENCY = 85.0


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def generate_sensor_data(rng: Optional[random.Random] = None) -> SensorReading:
    """
    Draw a fresh reading for every sensor channel.

    Each sample is baseline + (uniform(0, 1) - 0.5) * range.

    Args:
        rng: Optional random.Random for reproducible draws. Defaults to the
            module-level generator.

    Returns:
        SensorReading with SAMPLES_PER_CHANNEL samples per channel
    """
    source = rng if rng is not None else random

    channels = {
        name: [baseline + (source.random() - 0.5) * spread for _ in range(SAMPLES_PER_CHANNEL)]
        for name, (baseline, spread) in SENSOR_CHANNELS.items()
    }
    return SensorReading(**channels)


def efficiency_score(value: float, optimum: float, penalty: float) -> float:
    """Sub-score max(0, 100 - penalty * |value - optimum|)."""
    return max(0.0, 100.0 - penalty * abs(value - optimum))


def calculate_metrics(sensor_data: SensorReading, inspection_date: Optional[date] = None) -> dict:
    """
    Derive production, quality and compliance metrics from one reading.

    Pure function: does not mutate inputs, no I/O. Given the same reading and
    inspection date, the output is identical.

    Args:
        sensor_data: SensorReading to summarise
        inspection_date: Date recorded as last_inspection (defaults to today)

    Returns:
        dict containing:
            - "current_production": ProductionMetrics
            - "quality_metrics": QualityMetrics
            - "compliance_status": ComplianceStatus
    """
    means = {
        name: _mean(getattr(sensor_data, name))
        for name in EFFICIENCY_OPTIMA
    }

    sub_scores = [
        efficiency_score(means[name], optimum, penalty)
        for name, (optimum, penalty) in EFFICIENCY_OPTIMA.items()
    ]
    efficiency = sum(sub_scores) / len(sub_scores)
    delta = efficiency - REFERENCE_EFFICIENCY

    avg_energy = means["energy_consumption"]

    current_production = ProductionMetrics(
        units_per_hour=150 + delta * 2,
        quality_score=min(100.0, 98.5 + delta * 0.1),
        energy_consumption=avg_energy,
        temperature=means["temperature"],
        pressure=means["pressure"],
        vibration=means["vibration"],
        efficiency=efficiency,
    )

    quality_metrics = QualityMetrics(
        defect_rate=max(0.1, 1.5 - delta * 0.02),
        customer_returns=max(0.05, 0.3 - delta * 0.005),
        on_time_delivery=min(100.0, 98.2 + delta * 0.05),
    )

    if efficiency > 90:
        safety_audit = SafetyAuditStatus.PASS
    elif efficiency > 80:
        safety_audit = SafetyAuditStatus.WARNING
    else:
        safety_audit = SafetyAuditStatus.FAIL

    compliance_status = ComplianceStatus(
        safety_audit=safety_audit,
        environmental_compliance=(
            EnvironmentalStatus.PASS if avg_energy < 90 else EnvironmentalStatus.WARNING
        ),
        quality_certification=(
            CertificationStatus.VALID if efficiency > 85 else CertificationStatus.REVIEW_REQUIRED
        ),
        last_inspection=(inspection_date or date.today()).isoformat(),
    )

    logger.debug(
        "calculate_metrics: efficiency=%.2f energy=%.2f defect_rate=%.3f",
        efficiency,
        avg_energy,
        quality_metrics.defect_rate,
    )

    return {
        "current_production": current_production,
        "quality_metrics": quality_metrics,
        "compliance_status": compliance_status,
    }


class ManufacturingDataSimulator:
    """Produces a fresh PlantSnapshot for one plant/line on every poll.

    Holds no state between polls beyond the identifiers and the random source.
    """

    def __init__(
        self,
        plant_id: Optional[str] = None,
        line_id: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.plant_id = plant_id or get_plant_id()
        self.line_id = line_id or get_line_id()
        self.rng = rng

    def generate_sensor_data(self) -> SensorReading:
        return generate_sensor_data(self.rng)

    def calculate_metrics(self, sensor_data: SensorReading) -> dict:
        return calculate_metrics(sensor_data)

    def get_current_data(self) -> PlantSnapshot:
        """Poll every channel and return the reading with its derived metrics."""
        sensor_data = self.generate_sensor_data()
        metrics = self.calculate_metrics(sensor_data)

        snapshot = PlantSnapshot(
            plant_id=self.plant_id,
            line_id=self.line_id,
            timestamp=datetime.now(timezone.utc).isoformat(),
            sensor_data=sensor_data,
            **metrics,
        )

        logger.info(
            "snapshot for %s/%s: efficiency=%.1f%% energy=%.1f kWh",
            snapshot.plant_id,
            snapshot.line_id,
            snapshot.current_production.efficiency,
            snapshot.current_production.energy_consumption,
        )
        return snapshot
