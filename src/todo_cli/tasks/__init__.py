"""
Task subsystem.

Components:
- task_models.py: Task record + line (de)serialization
- task_filters.py: regex name predicates
- task_store.py: flat-file storage, priority insertion and refresh merge
- recurring.py: recurring-task sources for refresh
"""
