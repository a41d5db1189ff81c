import logging
from typing import Optional

import requests
from rdflib import BNode

from .exceptions import DocumentResolutionError
from .parsers import QuadStoreView, get_parser
from .settings import app_settings
from .signals import document_read

logger = logging.getLogger(__name__)


def is_success(response) -> bool:
    return response.status_code // 100 == 2


def extract(quads: QuadStoreView, predicate, default=None):
    """
    Returns the object of the first quad with the given predicate, or `default`

    Blank node objects are skipped: their labels change on every parse.
    """
    predicate = str(predicate)
    for quad in quads:
        if str(quad.predicate) == predicate and not isinstance(quad.object, BNode):
            return str(quad.object)
    return default


class BaseDocumentResolver:
    def __init__(self, http=None):
        self.http = http if http is not None else requests

    def can_resolve(self, uri):
        raise NotImplementedError

    def fetch(self, uri, accept=None):
        raise NotImplementedError

    def read(self, uri, accept=None) -> QuadStoreView:
        accept = accept or app_settings.Http.default_accept
        if not self.can_resolve(uri):
            raise DocumentResolutionError(f"{uri} can not be resolved")

        parser = get_parser(accept)
        text = self.fetch(uri, accept=accept)
        if text is None:
            return []

        quads = parser.parse(text, base_iri=uri)
        document_read.send_robust(sender=self.__class__, url=uri, quads=quads)
        return quads


class HttpDocumentResolver(BaseDocumentResolver):
    def can_resolve(self, uri):
        return uri.startswith("http://") or uri.startswith("https://")

    def fetch(self, uri, accept=None) -> Optional[str]:
        accept = accept or app_settings.Http.default_accept
        logger.debug(f"Fetching {uri} as {accept}")
        response = self.http.get(
            uri, headers={"Accept": accept}, timeout=app_settings.Http.request_timeout
        )
        if not is_success(response):
            logger.info(f"{uri} returned {response.status_code}, treating it as empty")
            return None
        return response.text
