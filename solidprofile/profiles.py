import logging
from dataclasses import dataclass

import requests

from .discovery import StorageDiscoveryWalker
from .resolvers import HttpDocumentResolver, extract
from .schemas import ProfileAttribute
from .signals import profile_resolved

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedProfile:
    web_id: str
    name: str
    fn: str
    preferences: str
    public_type_index: str
    private_type_index: str
    storage: str

    FIELDS = {
        ProfileAttribute.NAME: "name",
        ProfileAttribute.FORMATTED_NAME: "fn",
        ProfileAttribute.PREFERENCES: "preferences",
        ProfileAttribute.PUBLIC_TYPE_INDEX: "public_type_index",
        ProfileAttribute.PRIVATE_TYPE_INDEX: "private_type_index",
        ProfileAttribute.STORAGE: "storage",
    }

    def as_dict(self):
        data = {"webId": self.web_id}
        data.update({attr.key: getattr(self, field) for attr, field in self.FIELDS.items()})
        return data


class ProfileResolver:
    """
    Reads a WebID profile document and builds a ResolvedProfile out of it.

    The profile is fetched and parsed once per call; every attribute is then
    extracted from the same quads. When the profile does not declare a storage,
    the StorageDiscoveryWalker looks for it. Parse and transport errors are not
    handled here.

    Without an `http` client the resolver opens its own requests session and
    closes it in `close()`, or on leaving a `with` block.
    """

    document_resolver_class = HttpDocumentResolver
    storage_walker_class = StorageDiscoveryWalker

    def __init__(self, http=None):
        self.owns_http = http is None
        self.http = requests.Session() if self.owns_http else http

    def close(self):
        if self.owns_http:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def get_document_resolver(self):
        return self.document_resolver_class(http=self.http)

    def get_storage_walker(self):
        return self.storage_walker_class(http=self.http)

    def resolve(self, web_id: str, accept=None) -> ResolvedProfile:
        logger.debug(f"Resolving profile of {web_id}")
        quads = self.get_document_resolver().read(web_id, accept=accept)

        values = {
            field: extract(quads, attr.predicate, attr.default)
            for attr, field in ResolvedProfile.FIELDS.items()
        }

        if values["storage"] is None:
            values["storage"] = self.get_storage_walker().discover(web_id)

        profile = ResolvedProfile(web_id=web_id, **values)
        profile_resolved.send_robust(sender=self.__class__, profile=profile)
        return profile
