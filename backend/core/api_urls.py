from django.urls import path
from . import views

urlpatterns = [
    path('about/', views.AboutView.as_view(), name='about'),
    path('contact-info/', views.ContactInfoView.as_view(), name='contact-info'),
    path('projects/', views.ProjectListView.as_view(), name='project-list'),
    path('skills/', views.SkillListView.as_view(), name='skill-list'),
    path('experience/', views.ExperienceListView.as_view(), name='experience-list'),
    path('education/', views.EducationListView.as_view(), name='education-list'),
    path('certifications/', views.CertificationListView.as_view(), name='certification-list'),
    path('contact/', views.ContactCreateView.as_view(), name='contact-create'),
]
