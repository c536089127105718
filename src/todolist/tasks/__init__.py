"""
Task subsystem.

Components:
- task_models.py: data structures (Task, outcome enums, error types)
- task_store.py: in-memory ordered list + JSON task file load/save
- task_api.py: small high-level helpers used by connectors and commands
"""
