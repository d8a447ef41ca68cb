from django.apps import AppConfig


class DentalpayAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "dentalpay_app"
