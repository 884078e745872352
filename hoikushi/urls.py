"""
URL configuration for the hoikushi résumé builder.
"""
from django.urls import include, path

urlpatterns = [
    path('', include('core.urls')),
]
