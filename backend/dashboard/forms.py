from django import forms
from core.models import AboutMe, Certification, ContactInfo, Education, Experience, Project, Skill

DATE = forms.DateInput(attrs={"type": "date"}, format="%Y-%m-%d")
URL_ERRORS = {"invalid": "Invalid URL"}


class ImageUploadForm(forms.ModelForm):
    """ModelForm with an optional file that the view pushes to storage."""
    image = forms.ImageField(required=False)
    clear_image = forms.BooleanField(required=False, label="Remove current image")


class ProfileForm(ImageUploadForm):
    class Meta:
        model = AboutMe
        fields = ["title","description","bio","linkedin_url","github_url","twitter_url","resume_url"]
        widgets = {"bio": forms.Textarea(attrs={"rows": 6})}
        error_messages = {
            "title": {"required": "Title is required", "max_length": "Title must be less than 100 characters"},
            "description": {"required": "Description is required", "max_length": "Description must be less than 200 characters"},
            "bio": {"required": "Bio is required", "max_length": "Bio must be less than 1000 characters"},
            "linkedin_url": URL_ERRORS,
            "github_url": URL_ERRORS,
            "twitter_url": URL_ERRORS,
            "resume_url": URL_ERRORS,
        }


class ContactInfoForm(forms.ModelForm):
    class Meta:
        model = ContactInfo
        fields = ["email","phone","location"]
        error_messages = {
            "email": {"invalid": "Invalid email", "max_length": "Email must be less than 255 characters"},
            "phone": {"max_length": "Phone must be less than 20 characters"},
            "location": {"max_length": "Location must be less than 100 characters"},
        }


class ProjectForm(ImageUploadForm):
    technologies = forms.CharField(
        required=False,
        help_text="Comma separated, e.g. Django, PostgreSQL, Docker",
    )

    class Meta:
        model = Project
        fields = [
            "title","description","long_description","demo_url","github_url",
            "technologies","featured","status","order_index",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
            "long_description": forms.Textarea(attrs={"rows": 6}),
            "status": forms.TextInput(attrs={"placeholder": "e.g., completed, in-progress"}),
        }
        error_messages = {
            "title": {"required": "Title is required", "max_length": "Title must be less than 200 characters"},
            "description": {"required": "Description is required", "max_length": "Description must be less than 500 characters"},
            "status": {"required": "Status is required"},
            "demo_url": URL_ERRORS,
            "github_url": URL_ERRORS,
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk and not self.is_bound:
            self.initial["technologies"] = ", ".join(self.instance.technologies or [])

    def clean_technologies(self):
        raw = self.cleaned_data.get("technologies") or ""
        techs = []
        for t in raw.split(","):
            t = t.strip()
            if t and t not in techs:
                techs.append(t)
        return techs


class SkillForm(forms.ModelForm):
    class Meta:
        model = Skill
        fields = ["name","category","proficiency","icon_url","order_index"]
        error_messages = {
            "name": {"required": "Name is required", "max_length": "Name must be less than 100 characters"},
            "category": {"required": "Category is required", "max_length": "Category must be less than 50 characters"},
            "proficiency": {"min_value": "Proficiency must be at least 1", "max_value": "Proficiency must be at most 5"},
            "icon_url": URL_ERRORS,
        }


class _DatedForm(ImageUploadForm):
    def clean(self):
        data = super().clean()
        if data.get("current"):
            data["end_date"] = None
        return data


class ExperienceForm(_DatedForm):
    class Meta:
        model = Experience
        fields = [
            "company","position","employment_type","start_date","end_date","current",
            "description","location","company_url","order_index",
        ]
        widgets = {"start_date": DATE, "end_date": DATE, "description": forms.Textarea(attrs={"rows": 4})}
        labels = {"current": "I am currently working at this company"}
        error_messages = {
            "company": {"required": "Company is required"},
            "position": {"required": "Position is required"},
            "company_url": URL_ERRORS,
        }


class EducationForm(_DatedForm):
    class Meta:
        model = Education
        fields = [
            "institution","degree","field_of_study","start_date","end_date","current",
            "description","location","grade","order_index",
        ]
        widgets = {"start_date": DATE, "end_date": DATE, "description": forms.Textarea(attrs={"rows": 4})}
        labels = {"current": "I am currently studying here"}
        error_messages = {
            "institution": {"required": "Institution is required"},
            "degree": {"required": "Degree is required"},
        }


class CertificationForm(ImageUploadForm):
    class Meta:
        model = Certification
        fields = [
            "title","issuer","description","issue_date","expiry_date",
            "credential_id","credential_url","order_index",
        ]
        widgets = {"issue_date": DATE, "expiry_date": DATE, "description": forms.Textarea(attrs={"rows": 3})}
        error_messages = {
            "title": {"required": "Title is required", "max_length": "Title must be less than 200 characters"},
            "issuer": {"required": "Issuer is required", "max_length": "Issuer must be less than 100 characters"},
            "description": {"max_length": "Description must be less than 500 characters"},
            "credential_id": {"max_length": "Credential ID must be less than 100 characters"},
            "credential_url": URL_ERRORS,
        }

    def clean(self):
        data = super().clean()
        issued, expires = data.get("issue_date"), data.get("expiry_date")
        if issued and expires and expires < issued:
            self.add_error("expiry_date", "Expiry date must be after issue date")
        return data


class AuthForm(forms.Form):
    SIGN_IN = "signin"
    SIGN_UP = "signup"

    mode = forms.ChoiceField(choices=[(SIGN_IN, "Sign in"), (SIGN_UP, "Sign up")], initial=SIGN_IN, widget=forms.HiddenInput)
    email = forms.EmailField(error_messages={"required": "Please enter a valid email address", "invalid": "Please enter a valid email address"})
    password = forms.CharField(
        min_length=6,
        widget=forms.PasswordInput,
        error_messages={"required": "Password must be at least 6 characters", "min_length": "Password must be at least 6 characters"},
    )

    def clean_email(self):
        return self.cleaned_data["email"].strip().lower()
