"""
Health Monitoring Module

Checks a PlantSnapshot against fixed thresholds and summarises the result.

- check_system_health(snapshot) -> list[Alert]: rules evaluated in a fixed order
- generate_monitoring_report(snapshot, alerts) -> MonitoringReport

Rules (strict comparisons, a value exactly at the limit raises nothing):
- temperature span (max - min) > 3      -> WARNING
- mean energy consumption > 90          -> CRITICAL
- defect rate > 2                       -> HIGH
"""

import logging

from .models import Alert, AlertLevel, MonitoringReport, MonitoringSummary, PlantSnapshot

logger = logging.getLogger(__name__)

TEMPERATURE_SPAN_LIMIT = 3.0
ENERGY_LIMIT_KWH = 90.0
DEFECT_RATE_LIMIT = 2.0

HEALTH_SCORE_MAX = 100
HEALTH_PENALTY_PER_ALERT = 10


def check_system_health(snapshot: PlantSnapshot) -> list[Alert]:
    """
    Evaluate the health rules against one snapshot.

    Args:
        snapshot: PlantSnapshot to check

    Returns:
        Alerts in rule order (temperature, energy, quality); empty if healthy
    """
    alerts: list[Alert] = []

    temperatures = snapshot.sensor_data.temperature
    temp_span = max(temperatures) - min(temperatures)
    if temp_span > TEMPERATURE_SPAN_LIMIT:
        alerts.append(Alert(
            level=AlertLevel.WARNING,
            message=f"Temperature variance ({temp_span:.1f}°C) exceeds normal range",
            metric="temperature",
            value=temp_span,
        ))

    avg_energy = snapshot.current_production.energy_consumption
    if avg_energy > ENERGY_LIMIT_KWH:
        alerts.append(Alert(
            level=AlertLevel.CRITICAL,
            message=f"Energy consumption ({avg_energy:.1f} kWh) is above optimal range",
            metric="energy",
            value=avg_energy,
        ))

    defect_rate = snapshot.quality_metrics.defect_rate
    if defect_rate > DEFECT_RATE_LIMIT:
        alerts.append(Alert(
            level=AlertLevel.HIGH,
            message=f"Defect rate ({defect_rate:.2f}%) is above target",
            metric="quality",
            value=defect_rate,
        ))

    logger.debug(
        "check_system_health: span=%.3f energy=%.3f defect_rate=%.3f alerts=%d",
        temp_span,
        avg_energy,
        defect_rate,
        len(alerts),
    )
    return alerts


def compute_health_score(alert_count: int) -> int:
    """100 minus 10 per alert, floored at 0."""
    return max(0, HEALTH_SCORE_MAX - HEALTH_PENALTY_PER_ALERT * alert_count)


def generate_monitoring_report(snapshot: PlantSnapshot, alerts: list[Alert]) -> MonitoringReport:
    """
    Bundle the health score, alerts and headline metrics for one snapshot.

    Deterministic given its inputs; does not mutate them.
    """
    production = snapshot.current_production
    return MonitoringReport(
        timestamp=snapshot.timestamp,
        plant_id=snapshot.plant_id,
        line_id=snapshot.line_id,
        health_score=compute_health_score(len(alerts)),
        alerts=list(alerts),
        metrics=MonitoringSummary(
            efficiency=production.efficiency,
            quality=production.quality_score,
            energy=production.energy_consumption,
            production=production.units_per_hour,
        ),
    )


class ManufacturingMonitor:
    """Object wrapper over the health rules, for callers that hold a monitor."""

    def check_system_health(self, snapshot: PlantSnapshot) -> list[Alert]:
        return check_system_health(snapshot)

    def generate_monitoring_report(self, snapshot: PlantSnapshot, alerts: list[Alert]) -> MonitoringReport:
        return generate_monitoring_report(snapshot, alerts)
