# agentctl

A command-line tool for a control plane that manages agents and the tasks
they work on.

## Installation

```
pip install .
```

## Usage

The `agentctl` command has four subcommands.

List the registered agents. The `-f`/`--filter` option is echoed in the
heading:

```
agentctl list
agentctl list --filter planner
```

Show the status of one agent. It is printed as compact JSON with sorted keys:

```
agentctl status agent-01
```

Send an action to an agent:

```
agentctl send agent-01 restart
```

View and manage tasks:

```
agentctl tasks list
agentctl tasks cancel task-001
agentctl tasks assign task-002 agent-01
```

The command can also be run as `python -m agentctl.cli`.

## What it does not do

- The tool does not connect to any control plane. `list`, `status` and
  `tasks list` print fixed sample data. `send`, `tasks cancel` and
  `tasks assign` print a confirmation but change nothing.
- Configuration, environment profiles and the describe, deploy, invoke and
  entity-list actions exist only as functions in `agentctl.commands`. The
  `agentctl` command has no subcommands for them.
- An output format can be chosen and stored, but no command formats its
  output with it. The functions that accept one only print which format was
  asked for.
- `env_set` does not store the chosen profile anywhere.

## Configuration

Configuration is stored as TOML in `~/.agentctl/config.toml`. When `HOME`
is not set, the current directory is used in its place. The file holds one
optional setting, `output_format`. `config_add` writes it and `config_show`
prints it.

If the file is missing, unreadable or not valid TOML, `load_config` returns
an empty `Config`. It does the same when `output_format` is not a string.
`save_config` creates the directory when it is needed. It ignores failures
to write.

## Library use

```python
from agentctl.config import Config, config_path, load_config, save_config
from agentctl.formats import OutputFormat, parse_output_format

fmt = parse_output_format("JSON")        # OutputFormat.JSON
save_config(Config(output_format=fmt.value), config_path())
print(load_config(config_path()).output_format)   # "json"
```

`parse_output_format` accepts `json`, `toml`, `yaml` and `csv` in any case.
It raises `ValueError` for any other name.

`agentctl.commands` holds the functions behind each action. Each one prints
to standard output:

- `list_agents` and `status_agent`
- `send_command`
- `list_tasks`, `cancel_task` and `assign_task`
- `config_add` and `config_show`
- `env_show` and `env_set`
- `describe`, `deploy`, `invoke` and `list_entities`

`agentctl.model` holds the description model:

- `LevelOfDetail` is an ordered enum with the members `STANDARD`, `CONCISE`,
  `VERBOSE` and `NONE`.
- `Description` maps levels of detail to text. Its `describe` method returns
  the text for a level, or `None` when there is none.
- `Describable` is an abstract base class with one method, `descriptors`.
- `add` adds two unsigned 64-bit integers. It raises `ValueError` for values
  out of range and `OverflowError` on overflow.

## Development

```
pip install -e ".[test]"
pytest
```