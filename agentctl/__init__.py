"""Control plane command-line tool for agents and tasks, with stored configuration."""

__version__ = "0.1.0"