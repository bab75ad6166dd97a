"""
Reference Plant Snapshot Module

This module defines the fixed reference snapshot used by the basic pipeline:
- Function: build_reference_snapshot() -> PlantSnapshot
- Five samples per channel for temperature, pressure, vibration and energy
- Hand-set production, quality and compliance figures (all nominal)
"""

from datetime import datetime, timezone
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


def build_reference_sensor_data() -> SensorReading:
    """Five-sample readings with every channel close to its baseline."""
    return SensorReading(
        temperature=[185.5, 186.2, 184.8, 185.1, 185.9],
        pressure=[2.1, 2.15, 2.08, 2.12, 2.09],
        vibration=[0.8, 0.85, 0.78, 0.82, 0.79],
        energy_consumption=[85.2, 86.1, 84.8, 85.5, 85.9],
    )


def build_reference_snapshot(
    plant_id: Optional[str] = None,
    line_id: Optional[str] = None,
) -> PlantSnapshot:
    """
    Build the reference snapshot for a line running at nominal conditions.

    Production and quality figures are fixed rather than derived, so no
    efficiency score is attached.

    Args:
        plant_id: Plant identifier (defaults to config)
        line_id: Line identifier (defaults to config)

    Returns:
        PlantSnapshot: a new snapshot on every call
    """
    return PlantSnapshot(
        plant_id=plant_id or get_plant_id(),
        line_id=line_id or get_line_id(),
        timestamp=datetime.now(timezone.utc).isoformat(),
        sensor_data=build_reference_sensor_data(),
        current_production=ProductionMetrics(
            units_per_hour=150,
            quality_score=98.5,
            energy_consumption=85.2,
            temperature=185.5,
            pressure=2.1,
            vibration=0.8,
        ),
        quality_metrics=QualityMetrics(
            defect_rate=1.5,
            customer_returns=0.3,
            on_time_delivery=98.2,
        ),
        compliance_status=ComplianceStatus(
            safety_audit=SafetyAuditStatus.PASS,
            environmental_compliance=EnvironmentalStatus.PASS,
            quality_certification=CertificationStatus.VALID,
            last_inspection="2024-01-15",
        ),
    )
