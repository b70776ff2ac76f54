# apps/tasks/models.py

import datetime
from datetime import timedelta

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone


def _local_now(now=None):
    """
    Reference point for the scopes as (date, past_midnight)

    A due date stands for midnight of that day. An aware datetime is
    taken in local time, a naive one as-is and a plain date as its own
    midnight. Defaults to the current local time.
    """
    if now is None:
        now = timezone.localtime()
    if isinstance(now, datetime.datetime):
        if timezone.is_aware(now):
            now = timezone.localtime(now)
        return now.date(), now.time() != datetime.time.min
    return now, False


class Project(models.Model):
    """Project grouping tasks"""

    title = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'projects'
        ordering = ['title']

    def __str__(self):
        return self.title


class TaskQuerySet(models.QuerySet):
    """
    Named scopes over tasks

    Due dates are compared with `now` as midnight of that day, with
    exclusive boundaries. Past midnight, a task due today is late and
    one due in exactly a week is still due this week. The requesting
    admin is always passed in explicitly.
    """

    def due_this_week(self, now=None):
        today, past_midnight = _local_now(now)
        week_end = today + timedelta(days=settings.TASKDESK_WEEK_DAYS)
        if past_midnight:
            return self.filter(due_date__gt=today, due_date__lte=week_end)
        return self.filter(due_date__gt=today, due_date__lt=week_end)

    def late(self, now=None):
        today, past_midnight = _local_now(now)
        if past_midnight:
            return self.filter(due_date__lte=today)
        return self.filter(due_date__lt=today)

    def mine(self, admin_user):
        return self.filter(admin_user_id=admin_user.pk)

    def for_project(self, project):
        return self.filter(project_id=project.pk)

    def with_relations(self):
        return self.select_related('project', 'admin_user')


class Task(models.Model):
    """
    Task assigned to an admin user inside a project

    Done or Pending, driven only by is_done. Saving always runs full
    validation, so an invalid task never reaches the database.
    """

    project = models.ForeignKey(
        Project,
        on_delete=models.PROTECT,
        related_name='tasks'
    )
    admin_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='tasks',
        verbose_name='assigned to'
    )
    title = models.CharField(max_length=255)
    is_done = models.BooleanField(null=False)
    due_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TaskQuerySet.as_manager()

    class Meta:
        db_table = 'tasks'
        ordering = ['due_date', 'id']

    def __str__(self):
        return self.title

    def clean(self):
        if self.is_done not in (True, False):
            raise ValidationError({'is_done': "Must be true or false."})

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    @property
    def status(self):
        return "Done" if self.is_done else "Pending"

    def other_tasks_for(self, admin_user):
        """The admin's tasks on this task's project"""
        return Task.objects.mine(admin_user).for_project(self.project)


class TaskComment(models.Model):
    """Comment left by an admin user on a task"""

    task = models.ForeignKey(
        Task,
        on_delete=models.CASCADE,
        related_name='comments'
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='task_comments'
    )
    body = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'task_comments'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Comment by {self.author} on {self.task}"
