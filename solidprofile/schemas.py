import http.client
import json
import logging
from enum import Enum
from io import BytesIO
from urllib.error import URLError
from urllib.request import (
    HTTPHandler,
    HTTPSHandler,
    OpenerDirector,
    Request,
    UnknownHandler,
    install_opener,
)

from rdflib.namespace import FOAF, Namespace
from urllib3.response import HTTPResponse

logger = logging.getLogger(__name__)

VCARD = Namespace("http://www.w3.org/2006/vcard/ns#")
PIM_SPACE = Namespace("http://www.w3.org/ns/pim/space#")
SOLID = Namespace("http://www.w3.org/ns/solid/terms#")

STORAGE_TYPE = PIM_SPACE.Storage

NOT_FOUND = "hmm, not found"


class ProfileAttribute(Enum):
    """
    The attributes read from a WebID profile, as (key, predicate, default).

    The default is what a resolved profile carries when the document has no
    statement with that predicate. Storage has no default of its own: it is
    discovered by walking up the WebID containers.
    """

    NAME = ("name", FOAF.name, "Anonymous")
    FORMATTED_NAME = ("fn", VCARD.fn, "Anonymous")
    PREFERENCES = ("preferences", PIM_SPACE.preferencesFile, NOT_FOUND)
    PUBLIC_TYPE_INDEX = ("publicTypeIndex", SOLID.publicTypeIndex, NOT_FOUND)
    PRIVATE_TYPE_INDEX = ("privateTypeIndex", SOLID.privateTypeIndex, NOT_FOUND)
    STORAGE = ("storage", PIM_SPACE.storage, None)

    def __init__(self, key, predicate, default):
        self.key = key
        self.predicate = str(predicate)
        self.default = default


class ContextDocumentHandler(HTTPHandler, HTTPSHandler):
    """
    rdflib loads remote JSON-LD contexts with urllib, outside of the session
    and without a timeout. This handler answers those requests from
    `context_documents` (keyed by URL without its scheme) and refuses the rest.
    """

    context_documents = {}

    def _response_from_local_document(self, req, document) -> HTTPResponse:
        data = BytesIO()
        data.close()
        headers = {"Content-Type": "application/ld+json"}

        orig_response = HTTPResponse(body=data, msg=headers, preload_content=False)
        status = 200

        body = BytesIO()
        body.write(json.dumps(document).encode("utf-8"))
        body.seek(0)

        return HTTPResponse(
            status=status,
            reason=http.client.responses.get(status, None),
            body=body,
            headers=headers,
            original_response=orig_response,
            preload_content=False,
            request_method=req.get_method(),
            request_url=req.get_full_url(),
        )

    def _open_context(self, req: Request, url: str):
        document = self.context_documents.get(url)
        if document is not None:
            return self._response_from_local_document(req, document)

        logger.info(f"Refusing to load remote JSON-LD context {req.get_full_url()}")
        raise URLError(f"remote JSON-LD context {req.get_full_url()} is not loaded")

    def http_open(self, req: Request) -> http.client.HTTPResponse:
        return self._open_context(req, req.get_full_url().removeprefix("http://"))

    def https_open(self, req: Request) -> http.client.HTTPResponse:
        return self._open_context(req, req.get_full_url().removeprefix("https://"))


def secure_rdflib():
    opener = OpenerDirector()
    opener.add_handler(ContextDocumentHandler())
    opener.add_handler(UnknownHandler())
    install_opener(opener)


__all__ = [
    "FOAF",
    "VCARD",
    "PIM_SPACE",
    "SOLID",
    "STORAGE_TYPE",
    "NOT_FOUND",
    "ProfileAttribute",
    "ContextDocumentHandler",
    "secure_rdflib",
]
