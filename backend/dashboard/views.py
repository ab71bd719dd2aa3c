import logging
from dataclasses import dataclass, field
from functools import wraps

from django.contrib import messages
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.views import redirect_to_login
from django.db import DatabaseError, IntegrityError
from django.db.models import Q
from django.http import JsonResponse, Http404
from django.shortcuts import render, redirect, get_object_or_404
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods, require_POST

from core.models import (
    AboutMe, Certification, ContactInfo, ContactMessage,
    Education, Experience, Project, Skill,
)
from core.services.display import certification_badge, date_range, unread_count
from core.services.singleton import fetch_singleton, save_singleton
from core.services.storage import StorageError, upload_image
from .forms import (
    AuthForm, CertificationForm, ContactInfoForm, EducationForm,
    ExperienceForm, ProfileForm, ProjectForm, SkillForm,
)

logger = logging.getLogger(__name__)


@dataclass
class Manager:
    model: type
    form: type
    label: str
    image_field: str | None   # model field holding the uploaded file's URL; None when the type has no upload
    namespace: str | None     # storage folder
    columns: list = field(default_factory=list)   # (heading, callable(obj))
    ordering: tuple = ("order_index", "id")


MANAGERS = {
    "projects": Manager(
        Project, ProjectForm, "Project", "image_url", "projects",
        columns=[
            ("Title", lambda p: p.title),
            ("Status", lambda p: p.status),
            ("Featured", lambda p: "Yes" if p.featured else ""),
            ("Technologies", lambda p: ", ".join(p.technologies or [])),
        ],
    ),
    "skills": Manager(
        Skill, SkillForm, "Skill", None, None,
        columns=[
            ("Name", lambda s: s.name),
            ("Category", lambda s: s.category),
            ("Proficiency", lambda s: f"{s.proficiency}/5"),
        ],
        ordering=("category", "order_index", "id"),
    ),
    "experience": Manager(
        Experience, ExperienceForm, "Experience", "logo_url", "experience",
        columns=[
            ("Position", lambda e: e.position),
            ("Company", lambda e: e.company),
            ("Period", lambda e: date_range(e.start_date, e.end_date, e.current)),
        ],
    ),
    "education": Manager(
        Education, EducationForm, "Education", "image_url", "education",
        columns=[
            ("Degree", lambda e: e.degree),
            ("Institution", lambda e: e.institution),
            ("Period", lambda e: date_range(e.start_date, e.end_date, e.current)),
        ],
    ),
    "certifications": Manager(
        Certification, CertificationForm, "Certification", "image_url", "certifications",
        columns=[
            ("Title", lambda c: c.title),
            ("Issuer", lambda c: c.issuer),
            ("Status", certification_badge),
        ],
    ),
}


def admin_required(view):
    """Signed-in staff only. Anonymous users go to sign-in, others back to the site."""
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path())
        if not request.user.is_staff:
            messages.error(request, "Your account does not have admin access.")
            return redirect("core:portfolio")
        return view(request, *args, **kwargs)
    return wrapper


def _wants_json(request):
    return (
        request.headers.get("x-requested-with") == "XMLHttpRequest"
        or "application/json" in request.headers.get("accept", "")
    )

def _json_error(msg, code=400): return JsonResponse({"ok": False, "error": msg}, status=code)

def _manager(kind):
    try:
        return MANAGERS[kind]
    except KeyError:
        raise Http404(f"Unknown content type: {kind}")


def _apply_upload(request, form, namespace, obj, image_field):
    """Push the uploaded file to storage and point ``image_field`` at it.

    A failed upload keeps the previous URL and the record is still saved.
    """
    if form.cleaned_data.get("clear_image"):
        setattr(obj, image_field, "")
    upload = form.cleaned_data.get("image")
    if not upload:
        return
    try:
        setattr(obj, image_field, upload_image(namespace, upload))
    except StorageError:
        messages.error(request, "Failed to upload image")


# ----- AUTH -----
def _account_for(email):
    """Account whose username or email is ``email``."""
    User = get_user_model()
    return (
        User.objects.filter(Q(username=email) | Q(email__iexact=email))
        .order_by("pk")
        .first()
    )


@require_http_methods(["GET", "POST"])
def auth_view(request):
    if request.user.is_authenticated:
        return redirect("dashboard:overview")

    mode = request.GET.get("mode", AuthForm.SIGN_IN)
    if mode not in (AuthForm.SIGN_IN, AuthForm.SIGN_UP):
        mode = AuthForm.SIGN_IN
    if request.method == "POST":
        form = AuthForm(request.POST)
        mode = request.POST.get("mode", mode)
        if form.is_valid():
            email = form.cleaned_data["email"]
            password = form.cleaned_data["password"]
            if form.cleaned_data["mode"] == AuthForm.SIGN_UP:
                if _account_for(email) is not None:
                    messages.error(request, "Authentication Error: User already registered")
                else:
                    try:
                        get_user_model().objects.create_user(username=email, email=email, password=password)
                    except IntegrityError:
                        logger.exception("Sign-up failed for %s", email)
                        messages.error(request, "Authentication Error: An error occurred during authentication")
                    else:
                        logger.info("Account created for %s", email)
                        messages.success(request, "Account created successfully! You can now sign in.")
                        return redirect("dashboard:auth")
            else:
                account = _account_for(email)
                username = account.get_username() if account else email
                user = authenticate(request, username=username, password=password)
                if user is None:
                    logger.warning("Failed sign-in for %s", email)
                    messages.error(request, "Authentication Error: Invalid login credentials")
                else:
                    login(request, user)
                    messages.success(request, "Welcome back! You have been signed in successfully.")
                    nxt = request.GET.get("next")
                    if not (nxt and url_has_allowed_host_and_scheme(nxt, allowed_hosts={request.get_host()})):
                        nxt = "dashboard:overview"
                    return redirect(nxt)
    else:
        form = AuthForm(initial={"mode": mode})

    return render(request, "dashboard/auth.html", {"form": form, "mode": mode})


@require_POST
def signout_view(request):
    logout(request)
    messages.success(request, "Signed out successfully")
    return redirect("core:portfolio")


# ----- OVERVIEW -----
@admin_required
def overview(request):
    counts = {kind: m.model.objects.count() for kind, m in MANAGERS.items()}
    inbox = list(ContactMessage.objects.only("status"))
    return render(request, "dashboard/overview.html", {
        "counts": counts,
        "message_count": len(inbox),
        "unread": unread_count(inbox),
    })


# ----- SINGLETONS -----
@admin_required
@require_http_methods(["GET", "POST"])
def profile_edit(request):
    current = fetch_singleton(AboutMe)
    if request.method == "POST":
        form = ProfileForm(request.POST, request.FILES, instance=current)
        if form.is_valid():
            values = {f: form.cleaned_data[f] for f in ProfileForm.Meta.fields}
            holder = AboutMe(image_url=current.image_url if current else "")
            _apply_upload(request, form, "profile", holder, "image_url")
            values["image_url"] = holder.image_url
            try:
                save_singleton(AboutMe, values)
            except DatabaseError:
                logger.exception("Profile update error")
                messages.error(request, "Failed to save profile")
            else:
                messages.success(request, "Profile updated successfully")
                return redirect("dashboard:profile")
    else:
        form = ProfileForm(instance=current)
    return render(request, "dashboard/singleton_form.html", {
        "form": form, "title": "Profile", "image_url": current.image_url if current else "",
    })


@admin_required
@require_http_methods(["GET", "POST"])
def contact_info_edit(request):
    current = fetch_singleton(ContactInfo)
    if request.method == "POST":
        form = ContactInfoForm(request.POST, instance=current)
        if form.is_valid():
            values = {f: form.cleaned_data[f] for f in ContactInfoForm.Meta.fields}
            try:
                save_singleton(ContactInfo, values)
            except DatabaseError:
                logger.exception("Contact info update error")
                messages.error(request, "Failed to save contact information")
            else:
                messages.success(request, "Contact information updated successfully")
                return redirect("dashboard:contact-info")
    else:
        form = ContactInfoForm(instance=current)
    return render(request, "dashboard/singleton_form.html", {"form": form, "title": "Contact Info"})


# ----- CONTENT MANAGERS -----
@admin_required
def entity_list(request, kind):
    m = _manager(kind)
    try:
        items = list(m.model.objects.order_by(*m.ordering))
    except DatabaseError:
        logger.exception("Error fetching %s", kind)
        messages.error(request, f"Failed to load {kind}")
        items = []
    rows = [{
        "obj": o,
        "cells": [fn(o) for _, fn in m.columns],
        "edit_url": reverse(f"dashboard:{kind}-edit", args=[o.pk]),
        "delete_url": reverse(f"dashboard:{kind}-delete", args=[o.pk]),
    } for o in items]
    return render(request, "dashboard/entity_list.html", {
        "kind": kind,
        "label": m.label,
        "headings": [h for h, _ in m.columns],
        "rows": rows,
        "add_url": reverse(f"dashboard:{kind}-add"),
    })


@admin_required
@require_http_methods(["GET", "POST"])
def entity_form(request, kind, pk=None):
    m = _manager(kind)
    obj = get_object_or_404(m.model, pk=pk) if pk is not None else None
    if request.method == "POST":
        form = m.form(request.POST, request.FILES, instance=obj)
        if form.is_valid():
            item = form.save(commit=False)
            if m.image_field:
                _apply_upload(request, form, m.namespace, item, m.image_field)
            try:
                item.save()
            except DatabaseError:
                logger.exception("Failed to save %s", kind)
                messages.error(request, f"Failed to save {m.label.lower()}")
            else:
                messages.success(request, f"{m.label} {'updated' if obj else 'created'} successfully")
                return redirect(f"dashboard:{kind}-list")
    else:
        form = m.form(instance=obj)
    return render(request, "dashboard/entity_form.html", {
        "form": form,
        "kind": kind,
        "list_url": reverse(f"dashboard:{kind}-list"),
        "title": f"Edit {m.label}: {obj}" if obj else f"Add {m.label}",
        "image_url": getattr(obj, m.image_field) if obj and m.image_field else "",
    })


@admin_required
@require_POST
def entity_delete(request, kind, pk):
    m = _manager(kind)
    obj = get_object_or_404(m.model, pk=pk)
    try:
        obj.delete()
    except DatabaseError:
        logger.exception("Failed to delete %s id=%s", kind, pk)
        if _wants_json(request):
            return _json_error(f"Failed to delete {m.label.lower()}", 500)
        messages.error(request, f"Failed to delete {m.label.lower()}")
        return redirect(f"dashboard:{kind}-list")

    if _wants_json(request):
        return JsonResponse({"ok": True, "id": pk})
    messages.success(request, f"{m.label} deleted successfully")
    return redirect(f"dashboard:{kind}-list")


# ----- MESSAGES -----
@admin_required
def messages_list(request):
    inbox = list(ContactMessage.objects.all())
    return render(request, "dashboard/messages.html", {"inbox": inbox, "unread": unread_count(inbox)})


@admin_required
@require_POST
def message_status(request, pk):
    msg = get_object_or_404(ContactMessage, pk=pk)
    status = request.POST.get("status", "")
    if status not in dict(ContactMessage.STATUS_CHOICES):
        if _wants_json(request):
            return _json_error("Unknown status")
        messages.error(request, "Failed to update message status")
        return redirect("dashboard:messages")
    msg.status = status
    try:
        msg.save(update_fields=["status"])
    except DatabaseError:
        logger.exception("Failed to update status of message id=%s", pk)
        if _wants_json(request):
            return _json_error("Failed to update message status", 500)
        messages.error(request, "Failed to update message status")
        return redirect("dashboard:messages")

    if _wants_json(request):
        return JsonResponse({"ok": True, "id": pk, "status": status})
    messages.success(request, f"Message marked as {status}")
    return redirect("dashboard:messages")


@admin_required
@require_POST
def message_delete(request, pk):
    msg = get_object_or_404(ContactMessage, pk=pk)
    try:
        msg.delete()
    except DatabaseError:
        logger.exception("Failed to delete message id=%s", pk)
        if _wants_json(request):
            return _json_error("Failed to delete message", 500)
        messages.error(request, "Failed to delete message")
        return redirect("dashboard:messages")
    if _wants_json(request):
        return JsonResponse({"ok": True, "id": pk})
    messages.success(request, "Message deleted successfully")
    return redirect("dashboard:messages")
