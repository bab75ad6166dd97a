"""
Orchestration & Pipeline Module

Defines the pipelines that wire together:
1. A plant snapshot (reference readings or a fresh simulated poll)
2. Health monitoring (alerts + health score)
3. The task prompt
4. Content, Decision and Hybrid agents, run one after another

Each pipeline is split in two: prepare_*_run builds everything up to the task
prompt without any network call, and run_agents_sequentially sends the task.
run_*_pipeline chains both.

Agent calls are blocking and sequential. The first failure propagates to the
caller and the remaining agents are not run.
"""

import logging
from typing import Callable, Optional

from .agents import get_agents, run_agent
from .models import AgentResult, AgentSpec
from .monitor import ManufacturingMonitor, check_system_health, generate_monitoring_report
from .plant import build_reference_snapshot
from .tasks import build_advanced_task, build_basic_task
from .telemetry import ManufacturingDataSimulator, calculate_metrics

logger = logging.getLogger(__name__)

# called with ("started", agent, None) before each call and ("completed", agent, result) after it
ProgressCallback = Callable[[str, AgentSpec, Optional[AgentResult]], None]


def run_agents_sequentially(
    agents: list[AgentSpec],
    task: str,
    on_progress: Optional[ProgressCallback] = None,
) -> list[AgentResult]:
    """Run each agent on the same task, in order, stopping at the first error."""
    results: list[AgentResult] = []
    for agent in agents:
        logger.info("%s: running", agent.name)
        if on_progress:
            on_progress("started", agent, None)
        result = run_agent(agent, task)
        logger.info("%s: completed (%d chars)", agent.name, len(result.final_output))
        if on_progress:
            on_progress("completed", agent, result)
        results.append(result)
    return results


def prepare_basic_run() -> dict:
    """Build the reference snapshot and basic task without calling any agent.

    Returns:
        dict containing:
            - "snapshot": PlantSnapshot (reference readings)
            - "task": str (task prompt sent to every agent)
            - "agents": list[AgentSpec] (basic Content, Decision, Hybrid)
    """
    snapshot = build_reference_snapshot()
    logger.info("prepare_basic_run plant=%s line=%s", snapshot.plant_id, snapshot.line_id)

    return {
        "snapshot": snapshot,
        "task": build_basic_task(snapshot),
        "agents": get_agents(advanced=False),
    }


def run_basic_pipeline(on_progress: Optional[ProgressCallback] = None) -> dict:
    """Send the reference snapshot to the basic agent set.

    Returns:
        dict containing:
            - "snapshot": PlantSnapshot (reference readings)
            - "task": str (task prompt sent to every agent)
            - "results": list[AgentResult] (Content, Decision, Hybrid)

    Raises:
        AgentExecutionError: If any agent call fails.
    """
    prepared = prepare_basic_run()
    results = run_agents_sequentially(prepared["agents"], prepared["task"], on_progress)

    return {
        "snapshot": prepared["snapshot"],
        "task": prepared["task"],
        "results": results,
    }


def prepare_advanced_run(
    simulator: Optional[ManufacturingDataSimulator] = None,
    monitor: Optional[ManufacturingMonitor] = None,
) -> dict:
    """Poll the simulator, evaluate health and build the advanced task, without calling any agent.

    Args:
        simulator: Data source (defaults to a simulator for the configured plant/line)
        monitor: Health rules (defaults to ManufacturingMonitor)

    Returns:
        dict containing:
            - "snapshot": PlantSnapshot
            - "alerts": list[Alert]
            - "report": MonitoringReport
            - "task": str
            - "agents": list[AgentSpec] (advanced Content, Decision, Hybrid)
    """
    simulator = simulator or ManufacturingDataSimulator()
    monitor = monitor or ManufacturingMonitor()

    snapshot = simulator.get_current_data()
    alerts = monitor.check_system_health(snapshot)
    report = monitor.generate_monitoring_report(snapshot, alerts)

    logger.info(
        "prepare_advanced_run plant=%s line=%s health_score=%d alerts=%d",
        snapshot.plant_id,
        snapshot.line_id,
        report.health_score,
        len(alerts),
    )

    return {
        "snapshot": snapshot,
        "alerts": alerts,
        "report": report,
        "task": build_advanced_task(snapshot, report),
        "agents": get_agents(advanced=True),
    }


def run_advanced_pipeline(
    simulator: Optional[ManufacturingDataSimulator] = None,
    monitor: Optional[ManufacturingMonitor] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> dict:
    """Poll the simulator, evaluate health and send everything to the advanced agent set.

    Returns:
        dict containing:
            - "snapshot": PlantSnapshot
            - "alerts": list[Alert]
            - "report": MonitoringReport
            - "task": str
            - "results": list[AgentResult] (Content, Decision, Hybrid)

    Raises:
        AgentExecutionError: If any agent call fails.
    """
    prepared = prepare_advanced_run(simulator, monitor)
    results = run_agents_sequentially(prepared["agents"], prepared["task"], on_progress)

    return {
        "snapshot": prepared["snapshot"],
        "alerts": prepared["alerts"],
        "report": prepared["report"],
        "task": prepared["task"],
        "results": results,
    }


def run_component_check() -> dict:
    """Exercise metrics and health monitoring on the reference readings, without agents.

    Returns:
        dict containing:
            - "snapshot": PlantSnapshot with metrics derived from the reference readings
            - "alerts": list[Alert]
            - "report": MonitoringReport
    """
    reference = build_reference_snapshot()
    metrics = calculate_metrics(reference.sensor_data)
    snapshot = reference.model_copy(update=metrics)

    alerts = check_system_health(snapshot)
    report = generate_monitoring_report(snapshot, alerts)

    logger.info(
        "run_component_check health_score=%d alerts=%d efficiency=%.1f",
        report.health_score,
        len(alerts),
        snapshot.current_production.efficiency,
    )

    return {
        "snapshot": snapshot,
        "alerts": alerts,
        "report": report,
    }
