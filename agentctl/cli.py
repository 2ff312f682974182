"""Command line entry point: control plane CLI for managing agents."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from agentctl import commands


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the agentctl command."""
    parser = argparse.ArgumentParser(
        prog="agentctl", description="Control plane CLI for managing agents"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List all registered agents")
    list_parser.add_argument("-f", "--filter", dest="filter", default=None)

    status_parser = sub.add_parser("status", help="Get status for a specific agent")
    status_parser.add_argument("id", help="ID of the agent")

    send_parser = sub.add_parser("send", help="Send command to an agent")
    send_parser.add_argument("id", help="ID of the agent")
    send_parser.add_argument(
        "action", help="Action to send (e.g., restart, sync-config)"
    )

    tasks_parser = sub.add_parser("tasks", help="View or manage tasks")
    task_sub = tasks_parser.add_subparsers(dest="task_command", required=True)
    task_sub.add_parser("list")
    cancel_parser = task_sub.add_parser("cancel")
    cancel_parser.add_argument("id", help="ID of the task to cancel")
    assign_parser = task_sub.add_parser("assign")
    assign_parser.add_argument("task_id", help="ID of the task")
    assign_parser.add_argument("to", help="Agent to assign to")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the chosen command."""
    args = build_parser().parse_args(argv)
    match args.command:
        case "list":
            commands.list_agents(args.filter)
        case "status":
            commands.status_agent(args.id)
        case "send":
            commands.send_command(args.id, args.action)
        case "tasks":
            match args.task_command:
                case "list":
                    commands.list_tasks()
                case "cancel":
                    commands.cancel_task(args.id)
                case "assign":
                    commands.assign_task(args.task_id, args.to)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())