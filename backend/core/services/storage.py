import logging
import os
import posixpath

from django.conf import settings
from django.core.files.storage import default_storage
from django.utils import timezone

logger = logging.getLogger(__name__)

# entity -> folder inside the bucket
NAMESPACES = {
    "profile": "profile",
    "projects": "projects",
    "certifications": "certifications",
    "experience": "experience",   # company logos
    "education": "education",     # institution logos
}

# uploads under these namespaces keep one fixed name and replace the previous file
FIXED_NAMES = {"profile": "profile"}


class StorageError(Exception):
    pass


def _bucket():
    return settings.PORTFOLIO_STORAGE_BUCKET


def _extension(filename):
    ext = os.path.splitext(filename or "")[1].lower().lstrip(".")
    return ext or "bin"


def object_path(namespace, filename, now=None):
    """Path of an upload inside the bucket, e.g. ``portfolio-images/projects/1718000000000.png``."""
    if namespace not in NAMESPACES:
        raise StorageError(f"Unknown storage namespace: {namespace}")
    ext = _extension(filename)
    stem = FIXED_NAMES.get(namespace)
    if stem is None:
        now = now or timezone.now()
        stem = str(int(now.timestamp() * 1000))
    return posixpath.join(_bucket(), NAMESPACES[namespace], f"{stem}.{ext}")


def public_url(path):
    return default_storage.url(path)


def _drop_previous(path):
    # profile.png, profile.jpg, ... all go
    folder, name = posixpath.split(path)
    stem = posixpath.splitext(name)[0]
    if not default_storage.exists(folder):
        return
    for existing in default_storage.listdir(folder)[1]:
        if posixpath.splitext(existing)[0] == stem:
            default_storage.delete(posixpath.join(folder, existing))


def upload_image(namespace, upload):
    """Store ``upload`` under ``namespace`` and return its public URL."""
    path = object_path(namespace, getattr(upload, "name", ""))
    try:
        if namespace in FIXED_NAMES:
            _drop_previous(path)
        saved = default_storage.save(path, upload)
    except (OSError, ValueError) as e:
        logger.exception("Upload to %s failed", path)
        raise StorageError("Failed to upload image") from e
    logger.info("Stored %s", saved)
    return public_url(saved)
