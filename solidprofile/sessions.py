from typing import Optional

import requests
from django.utils.functional import cached_property

from .settings import app_settings


class BaseSession:
    """
    What the login component hands over once the user is authenticated: the
    WebID of the user and an HTTP client that carries their credentials.
    """

    def __init__(self, request=None):
        self.request = request

    @property
    def web_id(self) -> Optional[str]:
        raise NotImplementedError

    @property
    def http(self) -> requests.Session:
        raise NotImplementedError

    @property
    def is_logged_in(self) -> bool:
        return bool(self.web_id)

    def close(self):
        "Closes the HTTP client, if one was opened"
        http = self.__dict__.get("http")
        if http is not None:
            http.close()


class DjangoSession(BaseSession):
    @property
    def web_id(self):
        if self.request is None:
            return None
        return self.request.session.get(app_settings.Session.web_id_key)

    @cached_property
    def http(self):
        return requests.Session()


def get_session(request) -> BaseSession:
    return app_settings.SESSION_CLASS(request=request)
