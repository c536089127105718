"""Single-user to-do list: task model, JSON-backed store, console front-end."""

__version__ = "0.1.0"
