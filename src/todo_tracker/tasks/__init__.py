"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, filter/sort enums)
- task_store.py: JSON document storage (load/save/delete)
- task_query.py: filter/sort/search/tag views over a snapshot
- task_api.py: mutation operations (add/done/undone/remove/clear)
- errors.py: TodoError hierarchy
"""
