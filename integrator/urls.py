from django.urls import path

from integrator import views

urlpatterns = [
    path('', views.webhook, name='webhook'),
]
