"""
Agent Definitions

This module defines the three LLM-backed roles that receive the plant task:

1. ContentAgent: production reports and compliance documentation
2. DecisionAgent: sensor analysis and production schedule optimization
3. HybridAgent: coordination between the other two, conflict resolution, escalation

Each role has a basic and an advanced instructions text. Agents are plain
descriptors (name + instructions); run_agent submits a descriptor and a task
to the LLM service via llm.call_llm_text.

A failed run raises AgentExecutionError; there is no fallback output.
Tests monkeypatch call_llm_text to avoid real network calls.
"""

import logging
from typing import Any

from .models import AgentResult, AgentSpec
from .llm import call_llm_text

logger = logging.getLogger(__name__)


class AgentExecutionError(Exception):
    """
    Exception raised when an agent run fails.

    Carries structured error information for observability:
    - code: error category ('LLM_FAILURE' or 'EMPTY_OUTPUT')
    - message: human-readable error description
    - details: optional dict with debug information (agent name, cause type)
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"{code}: {message}")


# =============================================================================
# BASIC INSTRUCTIONS
# =============================================================================

CONTENT_INSTRUCTIONS = """You are a Content Agent responsible for generating production reports and keeping compliance documentation up to date.

Your responsibilities include:
- Generate detailed production reports from manufacturing data
- Keep all compliance documentation current and accurate
- Create audit trails for quality control processes
- Document safety procedures and incident reports
- Maintain regulatory compliance records

When generating reports, include:
- Production metrics and KPIs
- Quality control data
- Safety incident reports
- Compliance status
- Recommendations for improvement

Always format your responses clearly and provide actionable insights."""

DECISION_INSTRUCTIONS = """You are a Decision Agent responsible for analyzing sensor data and adjusting production schedules to maximize efficiency.

Your responsibilities include:
- Analyze real-time sensor data from manufacturing equipment
- Optimize production schedules based on current conditions
- Identify bottlenecks and suggest improvements
- Monitor equipment performance and predict maintenance needs
- Adjust production parameters for maximum efficiency

When making decisions, consider:
- Current production capacity
- Equipment status and health
- Quality metrics
- Energy consumption
- Resource availability
- Market demand

Provide specific, actionable recommendations with clear reasoning."""

HYBRID_INSTRUCTIONS = """You are a Hybrid Agent responsible for coordinating between the Content and Decision agents, resolving conflicts, and escalating issues to human operators when needed.

Your responsibilities include:
- Coordinate between Content and Decision agents
- Resolve conflicts between reporting requirements and production optimization
- Escalate critical issues to human operators
- Keep the system consistent and efficient
- Monitor overall system performance

When coordinating:
- Prioritize safety and compliance over pure efficiency
- Balance reporting needs with production optimization
- Identify when human intervention is required
- Provide clear escalation protocols

Always consider the broader impact of decisions on the entire manufacturing system."""


# =============================================================================
# ADVANCED INSTRUCTIONS
# =============================================================================

ADVANCED_CONTENT_INSTRUCTIONS = CONTENT_INSTRUCTIONS.replace(
    "Always format your responses clearly and provide actionable insights.",
    """Additionally:
- Provide trend analysis and historical comparisons
- Add statistical analysis to quality control data
- Add a risk assessment to safety incident reports
- Give every recommendation a priority level
- Mark each status with a visual indicator (✅ PASS, ⚠️ WARNING, ❌ FAIL)

Format your responses with clear sections and bullet points.
Always end with a summary section of key findings and recommendations.""",
)

ADVANCED_DECISION_INSTRUCTIONS = DECISION_INSTRUCTIONS.replace(
    "Provide specific, actionable recommendations with clear reasoning.",
    """Also account for predictive maintenance requirements and production targets.

Provide specific, actionable recommendations with:
- Clear reasoning and data analysis
- Priority levels (HIGH, MEDIUM, LOW)
- Expected impact and timeline
- Risk assessment and mitigation strategies
- Cost-benefit analysis where applicable

Use visual indicators for quick assessment:
- 🟢 OPTIMAL: parameters within optimal range
- 🟡 WARNING: parameters approaching limits
- 🔴 CRITICAL: parameters outside safe range
- 📈 IMPROVING: positive trend detected
- 📉 DECLINING: negative trend detected""",
)

ADVANCED_HYBRID_INSTRUCTIONS = HYBRID_INSTRUCTIONS.replace(
    "Always consider the broader impact of decisions on the entire manufacturing system.",
    """Conflict Resolution Protocol:
1. CRITICAL (🔴): Immediate human intervention required
2. HIGH (🟠): Automated resolution with human notification
3. MEDIUM (🟡): Automated resolution with monitoring
4. LOW (🟢): Automated resolution

Implement feedback loops for continuous improvement.
Always consider the broader impact of decisions on the entire manufacturing system and provide a coordination report.""",
)


CONTENT_AGENT = AgentSpec(name="ContentAgent", instructions=CONTENT_INSTRUCTIONS)
DECISION_AGENT = AgentSpec(name="DecisionAgent", instructions=DECISION_INSTRUCTIONS)
HYBRID_AGENT = AgentSpec(name="HybridAgent", instructions=HYBRID_INSTRUCTIONS)

ADVANCED_CONTENT_AGENT = AgentSpec(name="ContentAgent", instructions=ADVANCED_CONTENT_INSTRUCTIONS)
ADVANCED_DECISION_AGENT = AgentSpec(name="DecisionAgent", instructions=ADVANCED_DECISION_INSTRUCTIONS)
ADVANCED_HYBRID_AGENT = AgentSpec(name="HybridAgent", instructions=ADVANCED_HYBRID_INSTRUCTIONS)


def get_agents(advanced: bool = False) -> list[AgentSpec]:
    """Return the three agents in run order: Content, Decision, Hybrid."""
    if advanced:
        return [ADVANCED_CONTENT_AGENT, ADVANCED_DECISION_AGENT, ADVANCED_HYBRID_AGENT]
    return [CONTENT_AGENT, DECISION_AGENT, HYBRID_AGENT]


def run_agent(agent: AgentSpec, task: str) -> AgentResult:
    """
    Submit one agent descriptor and a task to the LLM service.

    Args:
        agent: AgentSpec with the role name and instructions
        task: Task text, sent as-is

    Returns:
        AgentResult with the agent's final output

    Raises:
        AgentExecutionError: LLM_FAILURE if the call raises, EMPTY_OUTPUT if the
            reply is blank
    """
    logger.debug(f"run_agent: {agent.name} task len={len(task)}")

    try:
        output = call_llm_text(agent.instructions, task)
    except Exception as e:
        raise AgentExecutionError(
            "LLM_FAILURE",
            f"{agent.name} failed: {e}",
            details={"agent": agent.name, "error_type": type(e).__name__},
        ) from e

    if not output or not output.strip():
        raise AgentExecutionError(
            "EMPTY_OUTPUT",
            f"{agent.name} returned no output",
            details={"agent": agent.name},
        )

    logger.debug(f"run_agent: {agent.name} produced {len(output)} chars")
    return AgentResult(agent_name=agent.name, final_output=output)
