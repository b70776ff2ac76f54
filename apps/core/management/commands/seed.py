# apps/core/management/commands/seed.py

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.core.models import AdminUser
from apps.tasks.models import Project, Task


class Command(BaseCommand):
    help = 'Creates the default admin user and, with --demo, a sample project'

    def add_arguments(self, parser):
        parser.add_argument('--email', default='admin@example.com')
        parser.add_argument('--password', default='password')
        parser.add_argument(
            '--demo',
            action='store_true',
            help='Also create a demo project with a few tasks'
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('🌱 Seeding Taskdesk...')

        admin = self._ensure_admin(options['email'], options['password'])

        if options['demo']:
            self._create_demo_project(admin)

        self.stdout.write(self.style.SUCCESS('✅ Seed done'))

    def _ensure_admin(self, email, password):
        """Default superuser, created only once"""
        admin = AdminUser.objects.filter(email__iexact=email).first()
        if admin:
            self.stdout.write(f'  👤 Admin already exists: {admin.email}')
            return admin

        admin = AdminUser.objects.create_superuser(email, password)
        self.stdout.write(f'  👤 Admin created: {admin.email}')
        return admin

    def _create_demo_project(self, admin):
        """Sample project: one task due this week, one late, one undated"""
        project, created = Project.objects.get_or_create(title='Demo project')
        if not created:
            self.stdout.write(f'  📁 Project already exists: {project.title}')
            return project

        today = timezone.localdate()
        tasks = [
            ('Write the project brief', False, today + timedelta(days=1)),
            ('Review the budget', False, today - timedelta(days=2)),
            ('Set up the repository', True, None),
        ]
        for title, is_done, due_date in tasks:
            Task.objects.create(
                project=project,
                admin_user=admin,
                title=title,
                is_done=is_done,
                due_date=due_date,
            )

        self.stdout.write(f'  📁 Project created: {project.title} ({len(tasks)} tasks)')
        return project
