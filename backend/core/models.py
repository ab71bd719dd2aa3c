from urllib.parse import quote

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class AboutMe(models.Model):
    """Profile shown in the hero and about sections. At most one row."""
    title = models.CharField(max_length=100)
    description = models.CharField(max_length=200)
    bio = models.TextField(max_length=1000)
    image_url = models.CharField(max_length=500, blank=True, default="")  # public URL of the stored file
    linkedin_url = models.URLField(blank=True, default="")
    github_url = models.URLField(blank=True, default="")
    twitter_url = models.URLField(blank=True, default="")
    resume_url = models.URLField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "about_me"
        verbose_name = "about me"
        verbose_name_plural = "about me"

    def __str__(self):
        return self.title


class ContactInfo(models.Model):
    """Public contact details. At most one row."""
    email = models.EmailField(max_length=255, blank=True, default="")
    phone = models.CharField(max_length=20, blank=True, default="")
    location = models.CharField(max_length=100, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "contact_info"
        verbose_name_plural = "contact info"

    def __str__(self):
        return self.email or "Contact info"


class ContactMessage(models.Model):
    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"
    STATUS_CHOICES = [
        (UNREAD, "Unread"),
        (READ, "Read"),
        (REPLIED, "Replied"),
    ]
    name = models.CharField(max_length=100)
    email = models.EmailField(max_length=255)
    subject = models.CharField(max_length=200, blank=True, default="")
    message = models.TextField(max_length=1000)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=UNREAD)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "contact_messages"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Message from {self.name}"

    @property
    def next_status(self):
        # unread -> read -> replied; replied is final
        if self.status == self.UNREAD:
            return self.READ
        if self.status == self.READ:
            return self.REPLIED
        return None

    def save(self, *args, **kwargs):
        if not self.subject:
            self.subject = f"Message from {self.name}"
        super().save(*args, **kwargs)

    def reply_mailto(self):
        subject = quote(f"Re: {self.subject or 'Your message'}")
        body = quote(f"Hi {self.name},\r\n\r\n")
        return f"mailto:{self.email}?subject={subject}&body={body}"


class Project(models.Model):
    title = models.CharField(max_length=200)
    description = models.CharField(max_length=500)
    long_description = models.TextField(blank=True, default="")
    image_url = models.CharField(max_length=500, blank=True, default="")  # public URL of the stored file
    demo_url = models.URLField(blank=True, default="")
    github_url = models.URLField(blank=True, default="")
    technologies = models.JSONField(default=list, blank=True)  # ["Django", "Postgres", ...]
    featured = models.BooleanField(default=False)
    status = models.CharField(max_length=50, default="completed")  # e.g. completed, in-progress
    order_index = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "projects"
        ordering = ["order_index", "id"]

    def __str__(self):
        return self.title


class Skill(models.Model):
    name = models.CharField(max_length=100)
    category = models.CharField(max_length=50)
    proficiency = models.PositiveSmallIntegerField(
        default=3,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )  # 1–5
    icon_url = models.URLField(blank=True, default="")
    order_index = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "skills"
        ordering = ["order_index", "id"]

    def __str__(self):
        return self.name


class Experience(models.Model):
    EMPLOYMENT_TYPES = [
        ("Full-time", "Full-time"),
        ("Part-time", "Part-time"),
        ("Contract", "Contract"),
        ("Freelance", "Freelance"),
        ("Internship", "Internship"),
        ("Self-employed", "Self-employed"),
    ]
    company = models.CharField(max_length=200)
    position = models.CharField(max_length=200)
    employment_type = models.CharField(max_length=20, choices=EMPLOYMENT_TYPES, blank=True, default="")
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    current = models.BooleanField(default=False)
    description = models.TextField(blank=True, default="")
    location = models.CharField(max_length=100, blank=True, default="")
    company_url = models.URLField(blank=True, default="")
    logo_url = models.CharField(max_length=500, blank=True, default="")  # public URL of the stored file
    order_index = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "experience"
        ordering = ["order_index", "id"]

    def __str__(self):
        return f"{self.position} at {self.company}"


class Education(models.Model):
    institution = models.CharField(max_length=200)
    degree = models.CharField(max_length=200)
    field_of_study = models.CharField(max_length=200, blank=True, default="")
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    current = models.BooleanField(default=False)
    description = models.TextField(blank=True, default="")
    location = models.CharField(max_length=100, blank=True, default="")
    grade = models.CharField(max_length=50, blank=True, default="")
    image_url = models.CharField(max_length=500, blank=True, default="")  # public URL of the stored file
    order_index = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "education"
        ordering = ["order_index", "id"]
        verbose_name_plural = "education"

    def __str__(self):
        return f"{self.degree} at {self.institution}"


class Certification(models.Model):
    title = models.CharField(max_length=200)
    issuer = models.CharField(max_length=100)
    description = models.TextField(max_length=500, blank=True, default="")
    issue_date = models.DateField(null=True, blank=True)
    expiry_date = models.DateField(null=True, blank=True)
    credential_id = models.CharField(max_length=100, blank=True, default="")
    credential_url = models.URLField(blank=True, default="")
    image_url = models.CharField(max_length=500, blank=True, default="")  # public URL of the stored file
    order_index = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "certifications"
        ordering = ["order_index", "id"]

    def __str__(self):
        return f"{self.title} ({self.issuer})"
