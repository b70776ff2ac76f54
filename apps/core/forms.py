# apps/core/forms.py

from django import forms
from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError

from .models import AdminUser


class AdminUserCreationForm(forms.ModelForm):
    """
    Create an admin user from an email only

    The account starts with an unusable password; the reset instructions
    sent on creation let the owner choose one.
    """

    class Meta:
        model = AdminUser
        fields = ['email']

    def clean_email(self):
        email = AdminUser.objects.normalize_email(self.cleaned_data['email'])
        if AdminUser.objects.filter(email__iexact=email).exists():
            raise ValidationError("An admin user with this email already exists")
        return email

    def save(self, commit=True):
        user = super().save(commit=False)
        user.set_unusable_password()
        if commit:
            user.save()
        return user


class AdminUserChangeForm(forms.ModelForm):
    """
    Edit an admin user

    The password is only required when it is being changed: leaving both
    fields empty keeps the stored one.
    """

    password1 = forms.CharField(
        label='Password',
        required=False,
        strip=False,
        widget=forms.PasswordInput(attrs={'autocomplete': 'new-password'}),
        help_text="Leave empty to keep the current password."
    )

    password2 = forms.CharField(
        label='Password confirmation',
        required=False,
        strip=False,
        widget=forms.PasswordInput(attrs={'autocomplete': 'new-password'}),
    )

    class Meta:
        model = AdminUser
        fields = ['email', 'is_active', 'is_superuser']

    def clean_password2(self):
        password1 = self.cleaned_data.get('password1')
        password2 = self.cleaned_data.get('password2')

        if not password1 and not password2:
            return password2

        if not password1:
            raise ValidationError("Enter the new password in both fields")
        if password1 != password2:
            raise ValidationError("The two password fields didn't match")

        password_validation.validate_password(password2, self.instance)
        return password2

    @property
    def password_changed(self):
        return bool(self.cleaned_data.get('password2'))

    def save(self, commit=True):
        user = super().save(commit=False)
        if self.password_changed:
            user.set_password(self.cleaned_data['password2'])
        if commit:
            user.save()
        return user
