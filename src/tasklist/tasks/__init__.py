"""
Task subsystem.

Components:
- task_models.py: value types and data structures (Identifier, Deadline, Task, ...)
- task_errors.py: error hierarchy rendered by the command layer
- task_store.py: in-memory store with all mutations and queries
"""
