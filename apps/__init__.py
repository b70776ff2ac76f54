# apps/__init__.py

"""
Taskdesk - Django applications

This package contains every application of the system:
- core: admin users, authentication service, admin site and dashboard
- tasks: projects, tasks, comments, scopes and their admin pages
"""

__version__ = '0.1.0'
