from django.urls import path
from . import views

app_name = "dashboard"

urlpatterns = [
    path("", views.overview, name="overview"),                          # /admin/
    path("auth/", views.auth_view, name="auth"),                        # /admin/auth/ (sign in / sign up)
    path("signout/", views.signout_view, name="signout"),

    path("profile/", views.profile_edit, name="profile"),
    path("contact/", views.contact_info_edit, name="contact-info"),

    path("messages/", views.messages_list, name="messages"),
    path("messages/<int:pk>/status/", views.message_status, name="message-status"),
    path("messages/<int:pk>/delete/", views.message_delete, name="message-delete"),
]

# projects, skills, experience, education, certifications share one set of views
for kind in views.MANAGERS:
    urlpatterns += [
        path(f"{kind}/", views.entity_list, {"kind": kind}, name=f"{kind}-list"),
        path(f"{kind}/add/", views.entity_form, {"kind": kind}, name=f"{kind}-add"),
        path(f"{kind}/<int:pk>/edit/", views.entity_form, {"kind": kind}, name=f"{kind}-edit"),
        path(f"{kind}/<int:pk>/delete/", views.entity_delete, {"kind": kind}, name=f"{kind}-delete"),
    ]
