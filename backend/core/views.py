import logging

from django.contrib import messages
from django.db import DatabaseError
from django.http import Http404
from django.shortcuts import render, redirect
from django.urls import reverse
from django.utils.timezone import now
from django.views.decorators.http import require_http_methods
from rest_framework import generics

from .forms import ContactForm
from .models import (
    AboutMe, Certification, ContactInfo, ContactMessage,
    Education, Experience, Project, Skill,
)
from .serializers import (
    AboutMeSerializer, CertificationSerializer, ContactInfoSerializer, ContactMessageSerializer,
    EducationSerializer, ExperienceSerializer, ProjectSerializer, SkillSerializer,
)
from .services.display import (
    certification_badge, date_range, filter_projects, group_skills, is_expired, star_rating,
)
from .services.notify import notify_quietly
from .services.singleton import fetch_singleton

logger = logging.getLogger(__name__)

PROJECT_FILTERS = ("all", "featured")


def _section(name, fetch, default):
    # each section fetches on its own; one failing table leaves the rest of the page intact
    try:
        return fetch()
    except DatabaseError:
        logger.exception("Error fetching %s", name)
        return default


def _portfolio_context(request, contact_form):
    mode = request.GET.get("filter", "all")
    if mode not in PROJECT_FILTERS:
        mode = "all"

    about = _section("about_me", lambda: fetch_singleton(AboutMe), None)
    contact_info = _section("contact_info", lambda: fetch_singleton(ContactInfo), None)
    skills = _section("skills", lambda: list(Skill.objects.order_by("order_index", "id")), [])
    experience = _section("experience", lambda: list(Experience.objects.all()), [])
    education = _section("education", lambda: list(Education.objects.all()), [])
    projects = _section("projects", lambda: list(Project.objects.all()), [])
    certifications = _section("certifications", lambda: list(Certification.objects.all()), [])

    for s in skills:
        s.stars = star_rating(s.proficiency)
    for row in experience + education:
        row.period = date_range(row.start_date, row.end_date, row.current)
    for c in certifications:
        c.badge = certification_badge(c)
        c.expired = is_expired(c.expiry_date)

    return {
        "now": now(),
        "about": about,
        "contact_info": contact_info,
        "skill_groups": group_skills(skills),
        "experience": experience,
        "education": education,
        "projects": filter_projects(projects, mode),
        "project_filter": mode,
        "project_counts": {"all": len(projects), "featured": len(filter_projects(projects, "featured"))},
        "certifications": certifications,
        "contact_form": contact_form,
    }


# HTML PAGES
def home_view(request):
    return render(request, 'core/home.html', _portfolio_context(request, ContactForm()))


@require_http_methods(["GET", "POST"])
def contact_view(request):
    if request.method == "GET":
        return redirect(reverse("core:portfolio") + "#contact")

    form = ContactForm(request.POST)
    if not form.is_valid():
        return render(request, 'core/home.html', _portfolio_context(request, form), status=400)

    try:
        msg = form.save()
    except DatabaseError:
        logger.exception("Contact form error")
        messages.error(request, "Failed to send message. Please try again or reach out via email directly.")
        return render(request, 'core/home.html', _portfolio_context(request, form))

    logger.info("Contact message id=%s received from %s", msg.pk, msg.email)
    notify_quietly(msg)
    messages.success(request, "Message sent successfully! Thank you for reaching out. I'll get back to you soon.")
    return redirect(reverse("core:portfolio") + "#contact")


def not_found_view(request, exception=None):
    logger.warning("404 Error: User attempted to access non-existent route: %s", request.path)
    return render(request, 'core/404.html', {"path": request.path}, status=404)


# API Views
class AboutView(generics.RetrieveAPIView):
    serializer_class = AboutMeSerializer

    def get_object(self):
        obj = fetch_singleton(AboutMe)
        if obj is None:
            raise Http404
        return obj


class ContactInfoView(generics.RetrieveAPIView):
    serializer_class = ContactInfoSerializer

    def get_object(self):
        obj = fetch_singleton(ContactInfo)
        if obj is None:
            raise Http404
        return obj


class ProjectListView(generics.ListAPIView):
    serializer_class = ProjectSerializer

    def get_queryset(self):
        qs = Project.objects.all()
        if self.request.query_params.get("featured", "").lower() in ("1", "true", "yes"):
            qs = qs.filter(featured=True)
        return qs


class SkillListView(generics.ListAPIView):
    queryset = Skill.objects.order_by("order_index", "id")
    serializer_class = SkillSerializer


class ExperienceListView(generics.ListAPIView):
    queryset = Experience.objects.all()
    serializer_class = ExperienceSerializer


class EducationListView(generics.ListAPIView):
    queryset = Education.objects.all()
    serializer_class = EducationSerializer


class CertificationListView(generics.ListAPIView):
    queryset = Certification.objects.all()
    serializer_class = CertificationSerializer


class ContactCreateView(generics.CreateAPIView):
    queryset = ContactMessage.objects.all()
    serializer_class = ContactMessageSerializer

    def perform_create(self, serializer):
        instance = serializer.save(status=ContactMessage.UNREAD)
        logger.info("Contact message id=%s received via API", instance.pk)
        notify_quietly(instance)
