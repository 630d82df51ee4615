"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Subtask, TaskStatus, Category)
- task_store.py: in-memory store with the mutation operations
- views.py: read-side filters and dashboard aggregates
- analysis.py: AI workload summary (prompt building + analyzer)
- seed.py: demo tasks used on first start
"""
