"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskMetrics, Urgency)
- time_metrics.py: pure countdown / progress / urgency functions
- task_store.py: in-memory ordered task list with add / remove / tick
- task_refresher.py: timer loop that ticks the store once per interval
"""
