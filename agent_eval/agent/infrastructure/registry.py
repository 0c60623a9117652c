"""create_agent — maps AgentConfig.type to the correct Agent implementation."""

from agent_eval.agent.domain.agent import Agent
from agent_eval.agent.domain.observer import AgentObserver
from agent_eval.agent.infrastructure.claude_sdk import ClaudeAgentSDKAgent
from agent_eval.agent.infrastructure.diagnostics import DiagnosticsChecker
from agent_eval.agent.infrastructure.errors import AgentTypeNotSupportedError
from agent_eval.config.domain.agent import AgentConfig

_SUPPORTED_TYPE = "claude_agent_sdk"


def create_agent(
    config: AgentConfig,
    diagnostics: DiagnosticsChecker,
    observer: AgentObserver,
) -> Agent:
    """Return the Agent implementation named by config.type.

    Raises:
        AgentTypeNotSupportedError: if config.type is not a known agent type.
    """
    if config.type == _SUPPORTED_TYPE:
        return ClaudeAgentSDKAgent(
            config=config, diagnostics=diagnostics, observer=observer
        )

    raise AgentTypeNotSupportedError(agent_type=config.type)
