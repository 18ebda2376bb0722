from django.apps import AppConfig


class IntegratorConfig(AppConfig):
    name = 'integrator'
