# apps/tasks/forms.py

from django import forms

from .models import TaskComment


class TaskCommentForm(forms.ModelForm):
    """Comment form on the task show page"""

    class Meta:
        model = TaskComment
        fields = ['body']
        labels = {'body': 'Comment'}
        widgets = {
            'body': forms.Textarea(attrs={
                'rows': 4,
                'cols': 60,
                'placeholder': 'Add a comment...'
            })
        }

    def save_for(self, task, author):
        comment = self.save(commit=False)
        comment.task = task
        comment.author = author
        comment.save()
        return comment
