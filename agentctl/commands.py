"""Actions behind each command; each one reports to standard output."""

from __future__ import annotations

import json

from agentctl.config import config_path, load_config, save_config
from agentctl.formats import OutputFormat


def _report_format(output: OutputFormat | None) -> None:
    if output is not None:
        print(f"Output format: {output.label}")


def list_agents(filter_text: str | None = None) -> None:
    """List registered agents, optionally noting a filter."""
    suffix = f" (filter: {filter_text})" if filter_text is not None else ""
    print(f"Fetching list of agents{suffix}...")
    print("agent-01\tplanner\tRunning")
    print("agent-02\tingestor\tIdle")


def status_agent(agent_id: str) -> None:
    """Show the status of one agent as JSON."""
    print(f"Fetching status for agent: {agent_id}")
    status = {
        "id": agent_id,
        "type": "ingestor",
        "state": "Running",
        "cpu": "78%",
        "mem": "312MB",
        "last_heartbeat": "2025-07-28T16:55:10Z",
    }
    print(json.dumps(status, sort_keys=True, separators=(",", ":"), ensure_ascii=False))


def send_command(agent_id: str, action: str) -> None:
    """Send an action to an agent."""
    print(f"Sending action '{action}' to agent '{agent_id}'")
    print("✅ Command sent.")


def list_tasks() -> None:
    """List known tasks."""
    print("Listing tasks...")
    print("task-001\tagent-01\tIn Progress")
    print("task-002\tagent-02\tQueued")


def cancel_task(task_id: str) -> None:
    """Cancel a task."""
    print(f"Cancelling task: {task_id}")
    print(f"✅ Task {task_id} cancelled.")


def assign_task(task_id: str, to: str) -> None:
    """Assign a task to an agent."""
    print(f"Assigning task '{task_id}' to agent '{to}'")
    print("✅ Assignment complete.")


def config_add(output: OutputFormat | None = None) -> None:
    """Store the chosen output format in the configuration file."""
    cfg = load_config()
    print("Adding configuration...")
    if output is not None:
        _report_format(output)
        cfg.output_format = output.value
    save_config(cfg)
    print(f"Configuration written to {config_path()}")


def config_show(output: OutputFormat | None = None) -> None:
    """Print the stored configuration."""
    cfg = load_config()
    print(f"Current configuration at {config_path()}:")
    if cfg.output_format is not None:
        print(f"output_format = {cfg.output_format}")
    else:
        print("No configuration found")
    _report_format(output)


def env_show(output: OutputFormat | None = None) -> None:
    """Show available environment profiles."""
    print("Showing environment profiles...")
    _report_format(output)


def env_set(profile_id: str, output: OutputFormat | None = None) -> None:
    """Select an environment profile."""
    print(f"Setting environment profile to: {profile_id}")
    _report_format(output)


def describe(entity_id: str, output: OutputFormat | None = None) -> None:
    """Describe an entity by id."""
    print(f"Describing {entity_id}")
    _report_format(output)


def deploy(entity_id: str, output: OutputFormat | None = None) -> None:
    """Deploy an entity by id."""
    print(f"Deploying {entity_id}")
    _report_format(output)


def invoke(entity_id: str, input_text: str, output: OutputFormat | None = None) -> None:
    """Invoke an entity with some input."""
    print(f"Invoking {entity_id} with input {input_text}")
    _report_format(output)


def list_entities(entity_id: str, output: OutputFormat | None = None) -> None:
    """List entities by id."""
    print(f"Listing {entity_id}")
    _report_format(output)