from django.contrib import admin
from .models import (
    AboutMe, Certification, ContactInfo, ContactMessage,
    Education, Experience, Project, Skill,
)

admin.site.register(AboutMe)
admin.site.register(ContactInfo)

@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ("name","email","subject","status","created_at")
    list_filter = ("status",)
    search_fields = ("name","email","subject")

@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("title","status","featured","order_index")
    list_filter = ("featured","status")
    search_fields = ("title",)

@admin.register(Skill)
class SkillAdmin(admin.ModelAdmin):
    list_display = ("name","category","proficiency","order_index")
    list_filter = ("category",)

@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    list_display = ("position","company","start_date","end_date","current","order_index")

@admin.register(Education)
class EducationAdmin(admin.ModelAdmin):
    list_display = ("degree","institution","start_date","end_date","current","order_index")

@admin.register(Certification)
class CertificationAdmin(admin.ModelAdmin):
    list_display = ("title","issuer","issue_date","expiry_date","order_index")
    search_fields = ("title","issuer")
