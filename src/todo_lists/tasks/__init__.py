"""
Task subsystem.

Components:
- dates.py: DueDate + parsing of MM/DD[/YY[YY]] input
- task_models.py: Task, TodoList (sorted view, index-addressed mutations)
- list_store.py: ListStore (lists by name + focus pointer)
- state_file.py: JSON persistence with atomic replace
- task_api.py: operations the command layer calls
"""
