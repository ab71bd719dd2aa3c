from rest_framework import serializers

from .models import (
    AboutMe, Certification, ContactInfo, ContactMessage,
    Education, Experience, Project, Skill,
)
from .services.display import certification_badge, date_range


class AboutMeSerializer(serializers.ModelSerializer):
    class Meta:
        model = AboutMe
        fields = [
            "id", "title", "description", "bio", "image_url", "linkedin_url",
            "github_url", "twitter_url", "resume_url", "updated_at",
        ]


class ContactInfoSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactInfo
        fields = ["email", "phone", "location"]


class ProjectSerializer(serializers.ModelSerializer):
    technologies = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = Project
        fields = [
            "id", "title", "description", "long_description", "image_url",
            "demo_url", "github_url", "technologies", "featured", "status", "order_index",
        ]


class SkillSerializer(serializers.ModelSerializer):
    class Meta:
        model = Skill
        fields = ["id", "name", "category", "proficiency", "icon_url", "order_index"]


class ExperienceSerializer(serializers.ModelSerializer):
    period = serializers.SerializerMethodField()

    class Meta:
        model = Experience
        fields = [
            "id", "company", "position", "employment_type", "start_date", "end_date",
            "current", "period", "description", "location", "company_url", "logo_url", "order_index",
        ]

    def get_period(self, obj):
        return date_range(obj.start_date, obj.end_date, obj.current)


class EducationSerializer(serializers.ModelSerializer):
    period = serializers.SerializerMethodField()

    class Meta:
        model = Education
        fields = [
            "id", "institution", "degree", "field_of_study", "start_date", "end_date",
            "current", "period", "description", "location", "grade", "image_url", "order_index",
        ]

    def get_period(self, obj):
        return date_range(obj.start_date, obj.end_date, obj.current)


class CertificationSerializer(serializers.ModelSerializer):
    badge = serializers.SerializerMethodField()

    class Meta:
        model = Certification
        fields = [
            "id", "title", "issuer", "description", "issue_date", "expiry_date", "badge",
            "credential_id", "credential_url", "image_url", "order_index",
        ]

    def get_badge(self, obj):
        return certification_badge(obj)


class ContactMessageSerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=2, max_length=100)
    email = serializers.EmailField(max_length=255)
    subject = serializers.CharField(max_length=200, required=False, allow_blank=True)
    message = serializers.CharField(min_length=10, max_length=1000)

    class Meta:
        model = ContactMessage
        fields = ["id", "name", "email", "subject", "message", "status", "created_at"]
        read_only_fields = ["id", "status", "created_at"]
