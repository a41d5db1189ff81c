import logging
from urllib.parse import urldefrag, urljoin, urlsplit

import requests
from requests.utils import parse_header_links

from .resolvers import is_success
from .schemas import STORAGE_TYPE
from .settings import app_settings
from .signals import storage_discovered

logger = logging.getLogger(__name__)


def parent_container(url: str) -> str:
    base = urlsplit(url)._replace(query="", fragment="").geturl()
    if base.endswith("/"):
        return urljoin(base, "../")
    return urljoin(base + "/", "../")


def is_root(url: str) -> bool:
    return urlsplit(url).path in ("", "/")


class StorageDiscoveryWalker:
    """
    Finds the storage (pod root) of a WebID by climbing its containers.

    Each parent container is requested in turn until one of them advertises
    itself as a `pim:Storage` through its `Link` header. If none does, the walk
    ends at the root of the WebID host, which is then taken as the storage.
    """

    def __init__(self, http=None, max_depth=None):
        self.http = http if http is not None else requests
        self.max_depth = max_depth if max_depth is not None else app_settings.Discovery.max_depth

    @staticmethod
    def is_storage(response) -> bool:
        if not is_success(response):
            return False

        header = response.headers.get("Link")
        if not header:
            return False

        for link in parse_header_links(header):
            rels = link.get("rel", "").split()
            if link.get("url") == str(STORAGE_TYPE) and "type" in rels:
                return True
        return False

    def probe(self, url: str) -> bool:
        logger.debug(f"Probing {url} for storage")
        response = self.http.get(url, timeout=app_settings.Http.request_timeout)
        return self.is_storage(response)

    def discover(self, web_id: str) -> str:
        current = urldefrag(web_id).url

        for _ in range(self.max_depth):
            parent = parent_container(current)

            if self.probe(parent):
                logger.info(f"Found storage for {web_id} at {parent}")
                storage_discovered.send_robust(
                    sender=self.__class__, web_id=web_id, storage=parent
                )
                return parent

            if is_root(parent):
                return parent

            current = parent

        logger.warning(f"Gave up looking for storage of {web_id} after {self.max_depth} probes")
        return current
