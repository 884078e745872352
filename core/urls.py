from django.urls import path
from . import views

urlpatterns = [
    path('', views.home, name='home'),
    path('resume', views.resume_form, name='resume'),
    path('career', views.career_form, name='career'),
    path('career/preview', views.career_preview, name='career-preview'),
    path('generate', views.generate_resume_pdf, name='generate'),
]
