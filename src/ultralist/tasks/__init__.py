"""
Task operations in request/response shape.

Components:
- task_api.py: create/update/toggle/delete tasks, subtasks, projects, folders and quick-add
  from free text; translates "no row affected" into NotFoundError
"""
