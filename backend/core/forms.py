from django import forms

from .models import ContactMessage


class ContactForm(forms.ModelForm):
    name = forms.CharField(
        min_length=2, max_length=100,
        error_messages={
            "required": "Name must be at least 2 characters",
            "min_length": "Name must be at least 2 characters",
            "max_length": "Name must be less than 100 characters",
        },
    )
    email = forms.EmailField(
        max_length=255,
        error_messages={
            "required": "Please enter a valid email address",
            "invalid": "Please enter a valid email address",
            "max_length": "Email must be less than 255 characters",
        },
    )
    subject = forms.CharField(
        required=False, max_length=200,
        error_messages={"max_length": "Subject must be less than 200 characters"},
    )
    message = forms.CharField(
        min_length=10, max_length=1000,
        widget=forms.Textarea(attrs={"rows": 5}),
        error_messages={
            "required": "Message must be at least 10 characters",
            "min_length": "Message must be at least 10 characters",
            "max_length": "Message must be less than 1000 characters",
        },
    )

    class Meta:
        model = ContactMessage
        fields = ["name", "email", "subject", "message"]

    def save(self, commit=True):
        msg = super().save(commit=False)
        msg.status = ContactMessage.UNREAD
        if commit:
            msg.save()
        return msg
