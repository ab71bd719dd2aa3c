import logging

import pytest
from django.db import DatabaseError
from django.test import Client

from core.models import AboutMe, ContactMessage, Project, Skill

pytestmark = pytest.mark.django_db

CONTACT = {
    "name": "Jo Doe",
    "email": "jo@example.com",
    "subject": "",
    "message": "I have a project in mind for you.",
}


def test_root_redirects_permanently(client):
    resp = client.get("/")
    assert resp.status_code == 301
    assert resp["Location"] == "/portfolio/"


def test_old_project_redirect(client):
    resp = client.get("/old-project")
    assert resp.status_code == 302
    assert resp["Location"] == "/projects/new-project"


def test_github_redirect(client, settings):
    resp = client.get("/github")
    assert resp.status_code == 302
    assert resp["Location"] == settings.GITHUB_PROFILE_URL


def test_portfolio_renders_empty_site(client):
    resp = client.get("/portfolio/")
    assert resp.status_code == 200
    assert resp.context["about"] is None
    assert b"No projects found." in resp.content


def test_portfolio_groups_skills(client, skills):
    resp = client.get("/portfolio/")

    groups = resp.context["skill_groups"]
    assert [c for c, _ in groups] == ["Backend", "Frontend", "DevOps"]
    assert [s.name for s in dict(groups)["Backend"]] == ["Python", "Django"]
    assert dict(groups)["DevOps"][0].stars == [True, True, True, False, False]


def test_portfolio_shows_profile(client):
    AboutMe.objects.create(title="Backend Developer", description="I build APIs", bio="Hi.")
    resp = client.get("/portfolio/")
    assert b"Backend Developer" in resp.content


def test_featured_filter(client):
    Project.objects.create(title="Starred", description="d", featured=True)
    Project.objects.create(title="Plain", description="d")

    resp = client.get("/portfolio/", {"filter": "featured"})
    assert [p.title for p in resp.context["projects"]] == ["Starred"]
    assert resp.context["project_counts"] == {"all": 2, "featured": 1}
    assert b"All Projects (2)" in resp.content
    assert b"Featured (1)" in resp.content

    resp = client.get("/portfolio/", {"filter": "bogus"})
    assert resp.context["project_filter"] == "all"
    assert len(resp.context["projects"]) == 2


def test_expired_certification_badge(client, certification):
    resp = client.get("/portfolio/")
    [cert] = resp.context["certifications"]
    assert cert.badge == "Expired"
    assert b"Expired" in resp.content


def test_failing_section_leaves_page_up(client, project, monkeypatch, caplog):
    def boom(*args, **kwargs):
        raise DatabaseError("skills table unavailable")

    monkeypatch.setattr(Skill.objects, "order_by", boom)
    with caplog.at_level(logging.ERROR, logger="core"):
        resp = client.get("/portfolio/")

    assert resp.status_code == 200
    assert resp.context["skill_groups"] == []
    assert [p.title for p in resp.context["projects"]] == ["Portfolio CMS"]
    assert "Error fetching skills" in caplog.text


class TestContact:
    def test_success_stores_mails_and_redirects(self, client, mailoutbox, settings):
        resp = client.post("/portfolio/contact/", CONTACT, follow=True)

        assert resp.redirect_chain[-1] == ("/portfolio/#contact", 302)
        msg = ContactMessage.objects.get()
        assert msg.status == ContactMessage.UNREAD
        assert msg.subject == "Message from Jo Doe"

        assert len(mailoutbox) == 1
        mail = mailoutbox[0]
        assert mail.subject == "New Portfolio Message: Message from Jo Doe"
        assert mail.to == [settings.CONTACT_RECEIVER_EMAIL]
        assert mail.reply_to == ["jo@example.com"]
        assert b"Message sent successfully!" in resp.content

    def test_form_is_reset_after_success(self, client):
        resp = client.post("/portfolio/contact/", CONTACT, follow=True)
        assert not resp.context["contact_form"].is_bound

    def test_invalid_input_is_not_stored(self, client, mailoutbox):
        resp = client.post("/portfolio/contact/", {**CONTACT, "message": "short"})

        assert resp.status_code == 400
        assert "Message must be at least 10 characters" in resp.context["contact_form"].errors["message"]
        assert not ContactMessage.objects.exists()
        assert mailoutbox == []

    def test_mail_failure_still_reports_success(self, client, monkeypatch, caplog):
        def broken(message):
            raise ConnectionRefusedError("smtp down")

        monkeypatch.setattr("core.services.notify.send_contact_notification", broken)
        with caplog.at_level(logging.ERROR, logger="core"):
            resp = client.post("/portfolio/contact/", CONTACT, follow=True)

        assert ContactMessage.objects.count() == 1
        assert b"Message sent successfully!" in resp.content
        assert "Email notification failed" in caplog.text

    def test_get_goes_back_to_the_form(self, client):
        resp = client.get("/portfolio/contact/")
        assert resp.status_code == 302
        assert resp["Location"] == "/portfolio/#contact"

    def test_mail_has_html_part_with_line_breaks(self, client, mailoutbox):
        client.post("/portfolio/contact/", {**CONTACT, "message": "line one\nline two"})

        html, mimetype = mailoutbox[0].alternatives[0]
        assert mimetype == "text/html"
        assert "line one<br>line two" in html

    def test_values_are_trimmed(self, client):
        client.post("/portfolio/contact/", {**CONTACT, "name": "  Jo Doe  ", "email": " jo@example.com "})
        msg = ContactMessage.objects.get()
        assert (msg.name, msg.email) == ("Jo Doe", "jo@example.com")

    def test_whitespace_does_not_count_towards_length(self, client):
        resp = client.post("/portfolio/contact/", {**CONTACT, "name": " J "})
        assert resp.status_code == 400
        assert "Name must be at least 2 characters" in resp.context["contact_form"].errors["name"]
        assert not ContactMessage.objects.exists()


def test_unknown_route_renders_not_found(client, caplog):
    with caplog.at_level(logging.WARNING, logger="core"):
        resp = client.get("/no/such/page/")

    assert resp.status_code == 404
    assert b"Return Home" in resp.content
    assert "/no/such/page/" in caplog.text


def test_header_admin_link_only_for_staff(admin_client, member_client):
    assert b'href="/admin/"' not in Client().get("/portfolio/").content
    assert b'href="/admin/"' in admin_client.get("/portfolio/").content
    assert b'href="/admin/"' not in member_client.get("/portfolio/").content
