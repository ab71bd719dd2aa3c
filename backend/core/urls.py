from django.urls import path
from . import views

app_name = "core"

urlpatterns = [
    path("", views.home_view, name="portfolio"),              # /portfolio/
    path("contact/", views.contact_view, name="contact"),     # /portfolio/contact/ (POST)
]
