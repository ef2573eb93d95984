"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- task_store.py: in-memory storage with sequential ids
- task_service.py: validation + delegation to the injected store
"""
