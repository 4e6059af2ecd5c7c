from django.apps import AppConfig


class SystemInfoConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "system_info"
    verbose_name = "System Info"
