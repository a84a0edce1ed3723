from django.apps import AppConfig


class WysiwygConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "wysiwyg"
    verbose_name = "Rich-text editor settings"
