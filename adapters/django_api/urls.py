"""
Picker Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("picker/choices", views.picker_choices_view),
    path("picker/submit", views.picker_submit_view),
]
