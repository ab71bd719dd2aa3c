"""
Shared fixtures for the portfolio test-suite.
"""
import io
from datetime import date

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from core.models import Certification, ContactMessage, Project, Skill


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploads out of the source tree."""
    settings.MEDIA_ROOT = str(tmp_path / "media")
    return settings.MEDIA_ROOT


@pytest.fixture
def png_upload():
    def make(name="logo.png"):
        buf = io.BytesIO()
        Image.new("RGB", (2, 2), "red").save(buf, "PNG")
        return SimpleUploadedFile(name, buf.getvalue(), content_type="image/png")
    return make


@pytest.fixture
def member(db):
    """Signed-up account without admin rights."""
    return get_user_model().objects.create_user(
        username="member@example.com", email="member@example.com", password="secret123",
    )


@pytest.fixture
def member_client(client, member):
    client.force_login(member)
    return client


@pytest.fixture
def project(db):
    return Project.objects.create(
        title="Portfolio CMS", description="Content dashboard", technologies=["Django"], order_index=1,
    )


@pytest.fixture
def skills(db):
    rows = [
        ("Python", "Backend", 5, 0),
        ("React", "Frontend", 4, 1),
        ("Django", "Backend", 4, 2),
        ("Docker", "DevOps", 3, 3),
    ]
    return [
        Skill.objects.create(name=n, category=c, proficiency=p, order_index=i)
        for n, c, p, i in rows
    ]


@pytest.fixture
def certification(db):
    return Certification.objects.create(
        title="AWS Solutions Architect", issuer="Amazon",
        issue_date=date(2022, 1, 1), expiry_date=date(2023, 1, 1),
    )


@pytest.fixture
def inbox_message(db):
    return ContactMessage.objects.create(
        name="Ann Example", email="ann@example.com", subject="Hello", message="I would like to talk.",
    )
