from datetime import datetime, timezone

import pytest
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from core.services.storage import StorageError, object_path, upload_image

NOON = datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc)


def test_timestamped_path():
    path = object_path("projects", "Screenshot.JPG", now=NOON)
    assert path == f"portfolio-images/projects/{int(NOON.timestamp() * 1000)}.jpg"


def test_profile_path_is_fixed():
    assert object_path("profile", "avatar.webp", now=NOON) == "portfolio-images/profile/profile.webp"


def test_missing_extension():
    assert object_path("education", "logo", now=NOON).endswith(".bin")


def test_bucket_comes_from_settings(settings):
    settings.PORTFOLIO_STORAGE_BUCKET = "media-bucket"
    assert object_path("experience", "acme.png", now=NOON).startswith("media-bucket/experience/")


def test_unknown_namespace():
    with pytest.raises(StorageError):
        object_path("skills", "icon.png")


def test_profile_upload_replaces_previous_file():
    first = upload_image("profile", ContentFile(b"one", name="a.png"))
    second = upload_image("profile", ContentFile(b"two", name="b.png"))

    assert first == second == "/media/portfolio-images/profile/profile.png"
    with default_storage.open("portfolio-images/profile/profile.png") as f:
        assert f.read() == b"two"


def test_upload_failure_raises_storage_error(monkeypatch):
    def broken(*args, **kwargs):
        raise OSError("read-only filesystem")

    monkeypatch.setattr(default_storage, "save", broken)
    with pytest.raises(StorageError, match="Failed to upload image"):
        upload_image("certifications", ContentFile(b"x", name="cert.png"))


def test_profile_upload_removes_other_extensions():
    upload_image("profile", ContentFile(b"png", name="a.png"))
    url = upload_image("profile", ContentFile(b"jpg", name="b.JPG"))

    assert url == "/media/portfolio-images/profile/profile.jpg"
    assert default_storage.listdir("portfolio-images/profile")[1] == ["profile.jpg"]


def test_timestamped_uploads_are_kept():
    upload_image("projects", ContentFile(b"1", name="a.png"))
    upload_image("projects", ContentFile(b"2", name="b.png"))

    assert len(default_storage.listdir("portfolio-images/projects")[1]) == 2
