"""
Core data models for the plant telemetry pipeline.

These models define the domain objects used throughout the system:
- Sensor readings and the metrics derived from them
- Plant snapshots (one poll of every channel plus derived metrics)
- Health alerts and monitoring reports
- Agent descriptors and agent results
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class SafetyAuditStatus(str, Enum):
    """Outcome of the derived safety audit."""
    PASS = "PASS"
    WARNING = "WARNING"
    FAIL = "FAIL"


class EnvironmentalStatus(str, Enum):
    """Outcome of the derived environmental compliance check."""
    PASS = "PASS"
    WARNING = "WARNING"


class CertificationStatus(str, Enum):
    """State of the quality certification."""
    VALID = "VALID"
    REVIEW_REQUIRED = "REVIEW_REQUIRED"


class AlertLevel(str, Enum):
    """Severity of a health alert."""
    WARNING = "WARNING"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class SensorReading(BaseModel):
    """Parallel sample sequences for every sensor channel of one snapshot."""
    temperature: list[float] = Field(..., description="Process temperature samples (°C)")
    pressure: list[float] = Field(..., description="Line pressure samples (bar)")
    vibration: list[float] = Field(..., description="Vibration samples (mm/s)")
    energy_consumption: list[float] = Field(..., description="Energy consumption samples (kWh)")
    humidity: list[float] = Field(default_factory=list, description="Relative humidity samples (%)")
    air_quality: list[float] = Field(default_factory=list, description="Air quality index samples")

    @field_validator("temperature", "pressure", "vibration", "energy_consumption")
    @classmethod
    def validate_non_empty(cls, values: list[float]) -> list[float]:
        """Averaged channels need at least one sample."""
        if not values:
            raise ValueError("sensor channel must contain at least one sample")
        return values


class ProductionMetrics(BaseModel):
    """Current production figures, mostly channel means."""
    units_per_hour: float = Field(..., description="Production rate")
    quality_score: float = Field(..., description="Quality score (0-100)")
    energy_consumption: float = Field(..., description="Mean energy consumption (kWh)")
    temperature: float = Field(..., description="Mean temperature (°C)")
    pressure: float = Field(..., description="Mean pressure (bar)")
    vibration: float = Field(..., description="Mean vibration (mm/s)")
    efficiency: Optional[float] = Field(default=None, description="Composite efficiency score (0-100)")


class QualityMetrics(BaseModel):
    """Quality figures derived from efficiency."""
    defect_rate: float = Field(..., description="Defect rate (%)")
    customer_returns: float = Field(..., description="Customer returns (%)")
    on_time_delivery: float = Field(..., description="On-time delivery (%)")


class ComplianceStatus(BaseModel):
    """Compliance state derived from efficiency and energy."""
    safety_audit: SafetyAuditStatus
    environmental_compliance: EnvironmentalStatus
    quality_certification: CertificationStatus
    last_inspection: str = Field(..., description="ISO date of the last inspection")


class PlantSnapshot(BaseModel):
    """One poll of all sensor channels plus everything derived from it."""
    plant_id: str
    line_id: str
    timestamp: str = Field(..., description="ISO 8601 timestamp of the poll")
    sensor_data: SensorReading
    current_production: ProductionMetrics
    quality_metrics: QualityMetrics
    compliance_status: ComplianceStatus


class Alert(BaseModel):
    """A single threshold violation found in a snapshot."""
    level: AlertLevel
    message: str
    metric: str = Field(..., description="Metric name, e.g. 'temperature'")
    value: float


class MonitoringSummary(BaseModel):
    """Headline numbers carried in a monitoring report."""
    efficiency: Optional[float] = None
    quality: float
    energy: float
    production: float


class MonitoringReport(BaseModel):
    """Health score and alerts for one snapshot."""
    timestamp: str
    plant_id: str
    line_id: str
    health_score: int = Field(..., description="100 minus 10 per alert, floored at 0")
    alerts: list[Alert] = Field(default_factory=list)
    metrics: MonitoringSummary


class AgentSpec(BaseModel):
    """Descriptor of an externally executed LLM agent."""
    name: str = Field(..., description="Agent role name, e.g. 'ContentAgent'")
    instructions: str = Field(..., description="System instructions for the role")


class AgentResult(BaseModel):
    """Free-text output of one agent run."""
    agent_name: str
    final_output: str
