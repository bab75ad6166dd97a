"""
Task prompt builders.

Both builders return the single task string that is sent, unchanged, to every
agent in a pipeline run.
"""

from .models import MonitoringReport, PlantSnapshot
from .serializer import to_pretty_json


def _percent(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.1f}%"


def build_basic_task(snapshot: PlantSnapshot) -> str:
    """Task text for the basic pipeline: readings, production and quality figures."""
    return f"""
Manufacturing Task for {snapshot.plant_id} - {snapshot.line_id}:

1. Generate a comprehensive compliance report for the last production batch including:
   - Quality metrics and defect analysis
   - Safety compliance status
   - Environmental impact assessment
   - Regulatory compliance verification

2. Analyze real-time sensor data and suggest production schedule adjustments:
   - Current sensor readings: {to_pretty_json(snapshot.sensor_data)}
   - Production metrics: {to_pretty_json(snapshot.current_production)}
   - Quality metrics: {to_pretty_json(snapshot.quality_metrics)}

3. If conflicts arise between reporting requirements and production optimization, resolve them or escalate to human operators.

4. Provide recommendations for:
   - Production efficiency improvements
   - Quality enhancement strategies
   - Safety protocol updates
   - Compliance maintenance
"""


def build_advanced_task(snapshot: PlantSnapshot, report: MonitoringReport) -> str:
    """Task text for the advanced pipeline, led by the current system status."""
    production = snapshot.current_production
    return f"""
Advanced Manufacturing Task for {snapshot.plant_id} - {snapshot.line_id}:

SYSTEM STATUS:
- Health Score: {report.health_score}%
- Active Alerts: {len(report.alerts)}
- Current Efficiency: {_percent(production.efficiency)}
- Quality Score: {_percent(production.quality_score)}

REAL-TIME DATA:
- Sensor Readings: {to_pretty_json(snapshot.sensor_data)}
- Production Metrics: {to_pretty_json(production)}
- Quality Metrics: {to_pretty_json(snapshot.quality_metrics)}
- Compliance Status: {to_pretty_json(snapshot.compliance_status)}

TASKS:
1. Generate a comprehensive compliance report including:
   - Quality metrics and defect analysis with trend analysis
   - Safety compliance status with risk assessment
   - Environmental impact assessment with recommendations
   - Regulatory compliance verification with audit trails

2. Analyze real-time sensor data and provide optimization recommendations:
   - Identify performance bottlenecks and improvement opportunities
   - Suggest production schedule adjustments based on current conditions
   - Provide predictive maintenance recommendations
   - Optimize energy consumption and efficiency

3. Coordinate system-wide optimization:
   - Resolve any conflicts between reporting and optimization requirements
   - Provide escalation protocols for critical issues
   - Ensure system stability and reliability
   - Implement continuous improvement strategies

4. Provide actionable recommendations for:
   - Production efficiency improvements with ROI analysis
   - Quality enhancement strategies with implementation timeline
   - Safety protocol updates with risk mitigation
   - Compliance maintenance with regulatory requirements
"""
