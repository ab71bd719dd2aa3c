from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('site-admin/', admin.site.urls),

    # Static redirects
    path('', RedirectView.as_view(url='/portfolio/', permanent=True)),
    path('old-project', RedirectView.as_view(url='/projects/new-project', permanent=False)),
    path('github', RedirectView.as_view(url=settings.GITHUB_PROFILE_URL, permanent=False), name='github'),

    # Public portfolio page and contact form
    path('portfolio/', include('core.urls')),

    # Content dashboard (sign-in lives at /admin/auth/)
    path('admin/', include('dashboard.urls')),

    # APIs under separate namespace
    path('api/', include(('core.api_urls', 'core'), namespace='core-api')),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

handler404 = 'core.views.not_found_view'
