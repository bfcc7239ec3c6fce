"""Django app configuration for file objects app."""

from django.apps import AppConfig


class FileObjectsConfig(AppConfig):
    """Configuration for file objects app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.file_objects'
    verbose_name = 'File objects'
