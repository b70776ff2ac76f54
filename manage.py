#!/usr/bin/env python
"""
Django's command-line utility for administrative tasks.

Taskdesk - projects, tasks and admin users
"""

import os
import sys


def main():
    """Run administrative tasks."""

    # Development settings by default
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    # Taskdesk shortcuts
    if len(sys.argv) > 1:
        command = sys.argv[1]

        # Initial setup
        if command == 'setup':
            print("🚀 Setting up Taskdesk...")

            print("📊 Applying migrations...")
            if os.system('python manage.py migrate') != 0:
                print("❌ Migrations failed")
                return

            print("📁 Collecting static files...")
            os.system('python manage.py collectstatic --noinput')

            print("👤 Creating default admin...")
            if os.system('python manage.py seed') == 0:
                print("✅ Setup done!")
                print("🔑 Sign in with: admin@example.com / password")
            else:
                print("⚠️  Partial setup (no default admin)")
            return

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
