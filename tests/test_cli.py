import pytest

from agentctl.cli import build_parser, main


def test_parser_reads_send_arguments():
    args = build_parser().parse_args(["send", "a1", "sync-config"])
    assert (args.command, args.id, args.action) == ("send", "a1", "sync-config")


def test_list(capsys):
    assert main(["list"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "Fetching list of agents..."


@pytest.mark.parametrize("flag", ["-f", "--filter"])
def test_list_filter(capsys, flag):
    main(["list", flag, "idle"])
    assert capsys.readouterr().out.splitlines()[0] == "Fetching list of agents (filter: idle)..."


def test_status(capsys):
    main(["status", "agent-02"])
    assert capsys.readouterr().out.splitlines()[0] == "Fetching status for agent: agent-02"


def test_send(capsys):
    main(["send", "agent-01", "restart"])
    assert "Sending action 'restart' to agent 'agent-01'" in capsys.readouterr().out


def test_tasks_list(capsys):
    main(["tasks", "list"])
    assert capsys.readouterr().out.splitlines()[0] == "Listing tasks..."


def test_tasks_cancel(capsys):
    main(["tasks", "cancel", "task-001"])
    assert "✅ Task task-001 cancelled." in capsys.readouterr().out


def test_tasks_assign(capsys):
    main(["tasks", "assign", "task-002", "agent-01"])
    assert capsys.readouterr().out.splitlines()[0] == "Assigning task 'task-002' to agent 'agent-01'"


@pytest.mark.parametrize("argv", [[], ["tasks"], ["status"], ["send", "a1"], ["bogus"]])
def test_bad_usage_exits_with_two(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2