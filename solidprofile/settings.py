import logging

from django.conf import settings
from django.test.signals import setting_changed
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class AppSettings:
    class Http:
        default_accept = "text/turtle"
        request_timeout = 10

    class Discovery:
        max_depth = 32

    class Parsing:
        document_parser = "solidprofile.parsers.RdflibDocumentParser"

    class Session:
        session_class = "solidprofile.sessions.DjangoSession"
        web_id_key = "solid_web_id"

    @property
    def DOCUMENT_PARSER(self):
        return import_string(self.Parsing.document_parser)

    @property
    def SESSION_CLASS(self):
        return import_string(self.Session.session_class)

    ATTRS = {
        "DEFAULT_ACCEPT": (Http, "default_accept"),
        "REQUEST_TIMEOUT": (Http, "request_timeout"),
        "MAX_DISCOVERY_DEPTH": (Discovery, "max_depth"),
        "DOCUMENT_PARSER": (Parsing, "document_parser"),
        "SESSION_CLASS": (Session, "session_class"),
        "SESSION_WEB_ID_KEY": (Session, "web_id_key"),
    }

    def __init__(self):
        self.defaults = {
            setting: getattr(setting_class, attr)
            for setting, (setting_class, attr) in self.ATTRS.items()
        }
        self.load()

    def load(self):
        # Overrides removed from the settings must not outlive a reload
        for setting, (setting_class, attr) in self.ATTRS.items():
            setattr(setting_class, attr, self.defaults[setting])

        user_settings = getattr(settings, "SOLID_PROFILE", {})

        for setting, value in user_settings.items():
            logger.debug(f"setting {setting} -> {value}")
            if setting not in self.ATTRS:
                logger.warning(f"Ignoring {setting} as it is not a setting for Solid Profile")
                continue

            setting_class, attr = self.ATTRS[setting]
            setattr(setting_class, attr, value)


app_settings = AppSettings()


def reload_settings(*args, **kw):
    setting = kw["setting"]
    if setting == "SOLID_PROFILE":
        app_settings.load()


setting_changed.connect(reload_settings)
