# apps/tasks/__init__.py

"""
Tasks - projects, tasks and comments

Contains:
- Project, Task and TaskComment models
- Task scopes (due this week, late, mine)
- Panels shared by the dashboard and the show pages
- Admin pages with scoped listing and show views
"""
