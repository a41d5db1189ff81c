from pathlib import Path

from django.apps import AppConfig


class SolidProfileConfig(AppConfig):
    name = "solidprofile"
    path = str(Path(__file__).parent)

    def ready(self):
        from . import signals  # noqa
        from .schemas import secure_rdflib

        secure_rdflib()
