from django.urls import path
from . import views

app_name = 'ai_assistant'

urlpatterns = [
    path('generate-uml/', views.generate_uml, name='generate_uml'),
]
