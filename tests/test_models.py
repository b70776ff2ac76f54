# tests/test_models.py

from datetime import date

import pytest
from django.core.exceptions import ValidationError
from django.db.models import ProtectedError

from apps.tasks.models import Project, Task, TaskComment


@pytest.mark.django_db
class TestTaskValidation:

    def test_valid_task_is_saved(self, make_task):
        task = make_task(title='Draft release notes', due_date=date(2026, 10, 19))

        assert task.pk is not None
        assert Task.objects.count() == 1

    @pytest.mark.parametrize('missing', ['title', 'project', 'admin_user'])
    def test_required_fields(self, project, admin, missing):
        fields = {'project': project, 'admin_user': admin, 'title': 'Draft release notes', 'is_done': False}
        if missing == 'title':
            fields['title'] = ''
        else:
            del fields[missing]

        with pytest.raises(ValidationError) as excinfo:
            Task.objects.create(**fields)

        assert missing in excinfo.value.message_dict
        assert Task.objects.count() == 0

    def test_is_done_cannot_be_null(self, project, admin):
        task = Task(project=project, admin_user=admin, title='Draft release notes', is_done=None)

        with pytest.raises(ValidationError) as excinfo:
            task.save()

        assert 'is_done' in excinfo.value.message_dict
        assert task.pk is None
        assert Task.objects.count() == 0

    def test_is_done_must_be_given(self, project, admin):
        with pytest.raises(ValidationError):
            Task.objects.create(project=project, admin_user=admin, title='Draft release notes')

    def test_due_date_is_optional(self, make_task):
        assert make_task(due_date=None).due_date is None


@pytest.mark.django_db
class TestTaskStatus:

    def test_done(self, make_task):
        assert make_task(is_done=True).status == 'Done'

    def test_pending(self, make_task):
        assert make_task(is_done=False).status == 'Pending'


@pytest.mark.django_db
class TestDeletion:

    def test_project_with_tasks_is_protected(self, project, make_task):
        make_task()

        with pytest.raises(ProtectedError):
            project.delete()

        assert Project.objects.filter(pk=project.pk).exists()

    def test_assignee_with_tasks_is_protected(self, admin, make_task):
        make_task()

        with pytest.raises(ProtectedError):
            admin.delete()

    def test_empty_project_can_be_deleted(self, project):
        project.delete()

        assert not Project.objects.exists()

    def test_deleting_task_removes_comments(self, admin, make_task):
        task = make_task()
        TaskComment.objects.create(task=task, author=admin, body='Looks good')

        task.delete()

        assert not TaskComment.objects.exists()


@pytest.mark.django_db
def test_other_tasks_for_same_project_only(admin, other_admin, project, make_task):
    elsewhere = Project.objects.create(title='Intranet')
    task = make_task(title='Homepage')
    sibling = make_task(title='Footer')
    make_task(title='Not mine', admin_user=other_admin)
    make_task(title='Other project', project=elsewhere)

    others = task.other_tasks_for(admin)

    assert set(others) == {task, sibling}
