"""
CLI Entrypoint Module

Plant telemetry → multi-agent CLI:
- basic:    reference readings → Content, Decision, Hybrid agents
- advanced: simulated poll + health monitoring → advanced agents
- check:    metrics and health monitoring only, no agent calls and no API key

Prints plant status and each agent's output to stdout.

Usage:
    python -m plant_agents.main basic
    python -m plant_agents.main advanced
    python -m plant_agents.main check
"""

import argparse
import logging

from .config import get_openai_api_key
from .models import AgentResult, AgentSpec, Alert, AlertLevel, MonitoringReport, PlantSnapshot
from .orchestrator import (
    prepare_advanced_run,
    prepare_basic_run,
    run_agents_sequentially,
    run_component_check,
)

logger = logging.getLogger(__name__)

ALERT_ICONS = {
    AlertLevel.CRITICAL: "🔴",
    AlertLevel.HIGH: "🟠",
    AlertLevel.WARNING: "🟡",
}

AGENT_HEADINGS = {
    "ContentAgent": "CONTENT AGENT OUTPUT",
    "DecisionAgent": "DECISION AGENT OUTPUT",
    "HybridAgent": "HYBRID AGENT OUTPUT",
}

AGENT_LABELS = {
    "ContentAgent": "Content Agent",
    "DecisionAgent": "Decision Agent",
    "HybridAgent": "Hybrid Agent",
}

AGENT_ACTIVITIES = {
    "ContentAgent": "Generating compliance reports",
    "DecisionAgent": "Analyzing production data",
    "HybridAgent": "Coordinating system optimization",
}


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _print_header(snapshot: PlantSnapshot) -> None:
    print(f"Plant: {snapshot.plant_id}")
    print(f"Production Line: {snapshot.line_id}")


def _print_alerts(alerts: list[Alert]) -> None:
    for alert in alerts:
        print(f"{ALERT_ICONS[alert.level]} {alert.level.value}: {alert.message}")


def _print_agent_outputs(results: list[AgentResult], width: int) -> None:
    print("=" * width)
    for result in results:
        print(f"\n{AGENT_HEADINGS.get(result.agent_name, result.agent_name.upper())}:")
        print("-" * (width // 2 + 10))
        print(result.final_output)


def _print_monitoring_summary(report: MonitoringReport) -> None:
    metrics = report.metrics
    print(f"Health Score: {report.health_score}%")
    if metrics.efficiency is not None:
        print(f"Efficiency: {metrics.efficiency:.1f}%")
    print(f"Quality: {metrics.quality:.1f}%")
    print(f"Energy Consumption: {metrics.energy:.1f} kWh")
    print(f"Production Rate: {metrics.production:.1f} units/hour")


def _require_api_key() -> bool:
    try:
        get_openai_api_key()
    except RuntimeError as exc:
        logger.error("%s", exc)
        print(f"ERROR: {exc}")
        return False
    return True


def _print_progress(event: str, agent: AgentSpec, result: AgentResult | None) -> None:
    label = AGENT_LABELS.get(agent.name, agent.name)
    if event == "started":
        print(f"{label}: {AGENT_ACTIVITIES.get(agent.name, 'running')}...")
    else:
        print(f"{label} completed\n")


def _print_status(report: MonitoringReport, alerts: list[Alert]) -> None:
    print(f"System Health Score: {report.health_score}%")
    print(f"Active Alerts: {len(alerts)}\n")
    if alerts:
        print("ACTIVE ALERTS:")
        _print_alerts(alerts)
        print()


def run_basic() -> int:
    """Run the basic pipeline, printing the plant header before the agent calls.

    Returns:
        0 on success, 1 on missing credential or agent failure.
    """
    if not _require_api_key():
        return 1

    print("Starting Multi-Agent Manufacturing Optimization System\n")
    try:
        prepared = prepare_basic_run()
        _print_header(prepared["snapshot"])
        print()
        results = run_agents_sequentially(prepared["agents"], prepared["task"], _print_progress)
    except Exception as exc:  # noqa: BLE001
        logger.exception("multi-agent pipeline failed")
        print(f"\nERROR: {exc}")
        return 1

    print("=== AGENT OUTPUTS ===")
    _print_agent_outputs(results, width=50)
    print("\nMulti-Agent System Execution Complete!")
    return 0


def run_advanced() -> int:
    """Run the advanced pipeline.

    Plant header, health score and alerts are printed before the first agent
    call, so they remain on screen when an agent fails.

    Returns:
        0 on success, 1 on missing credential or agent failure.
    """
    if not _require_api_key():
        return 1

    print("Starting Advanced Multi-Agent Manufacturing Optimization System\n")
    try:
        prepared = prepare_advanced_run()
        report: MonitoringReport = prepared["report"]

        _print_header(prepared["snapshot"])
        _print_status(report, prepared["alerts"])

        results = run_agents_sequentially(prepared["agents"], prepared["task"], _print_progress)
    except Exception as exc:  # noqa: BLE001
        logger.exception("advanced multi-agent pipeline failed")
        print(f"\nERROR: {exc}")
        return 1

    print("=== ADVANCED AGENT OUTPUTS ===")
    _print_agent_outputs(results, width=60)

    print("\n=== SYSTEM MONITORING SUMMARY ===")
    _print_monitoring_summary(report)
    print("\nAdvanced Multi-Agent System Execution Complete!")
    return 0


def run_check() -> int:
    """Exercise simulator and monitor without agent calls.

    Returns:
        0
    """
    print("Testing Multi-Agent Manufacturing System Components\n")
    output = run_component_check()
    snapshot: PlantSnapshot = output["snapshot"]
    report: MonitoringReport = output["report"]
    production = snapshot.current_production

    print("Data Simulator:")
    _print_header(snapshot)
    print(f"Efficiency: {production.efficiency:.1f}%")
    print(f"Quality Score: {production.quality_score:.1f}%")
    print(f"Energy Consumption: {production.energy_consumption:.1f} kWh")
    print(f"Production Rate: {production.units_per_hour:.1f} units/hour\n")

    print("Monitoring System:")
    print(f"Health Score: {report.health_score}%")
    print(f"Active Alerts: {len(output['alerts'])}")
    _print_alerts(output["alerts"])

    print("\nSystem components OK. Set OPENAI_API_KEY and run 'basic' or 'advanced' to call the agents.")
    return 0


COMMANDS = {
    "basic": run_basic,
    "advanced": run_advanced,
    "check": run_check,
}


def main(argv: list[str] | None = None) -> int:
    """Run the plant agents CLI.

    Returns:
        0 on success, 1 on error.
    """
    _configure_logging()

    parser = argparse.ArgumentParser(
        description="Simulated plant telemetry sent to Content, Decision and Hybrid LLM agents."
    )
    parser.add_argument(
        "command",
        choices=sorted(COMMANDS),
        help="basic: reference readings; advanced: simulated poll with health alerts; check: no agent calls.",
    )
    args = parser.parse_args(argv)
    return COMMANDS[args.command]()


def main_basic() -> int:
    _configure_logging()
    return run_basic()


def main_advanced() -> int:
    _configure_logging()
    return run_advanced()


def main_check() -> int:
    _configure_logging()
    return run_check()


if __name__ == "__main__":
    raise SystemExit(main())
