from django.contrib import admin
from django.urls import path, include

# === URL patterns ===
urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("api/", include("dentalpay_app.urls")),
]
