# apps/core/__init__.py

"""
Core - main Taskdesk application

Contains:
- AdminUser, the custom user model (email login, sign-in tracking)
- The authentication service (reset instructions, sign-in bookkeeping)
- The admin site whose index page is the dashboard
- The seed command for development
"""
