import logging
from typing import List, NamedTuple, Optional
from urllib.parse import urldefrag

import rdflib
from django.core.exceptions import ImproperlyConfigured
from rdflib.plugins.stores.memory import Memory
from rdflib.term import Identifier, URIRef

from .exceptions import DocumentParseError
from .settings import app_settings

logger = logging.getLogger(__name__)


class Quad(NamedTuple):
    subject: Identifier
    predicate: URIRef
    object: Identifier
    graph: Optional[Identifier]


QuadStoreView = List[Quad]


class DocumentOrderStore(Memory):
    """
    Memory store that also keeps every statement in the order the parser emitted it.

    rdflib graphs are sets, but profile extraction is first-match, so the
    order of the source document has to survive parsing. Duplicates are kept.
    """

    def __init__(self, *args, **kw):
        super().__init__(*args, **kw)
        self.statements: QuadStoreView = []

    def add(self, triple, context, quoted=False):
        super().add(triple, context, quoted)
        if quoted:
            return

        graph = context.identifier if context is not None else None
        self.statements.append(Quad(*triple, graph))


class BaseDocumentParser:
    media_types = {}

    def __init__(self, media_type: str):
        if media_type not in self.media_types:
            raise ImproperlyConfigured(f"{self.__class__.__name__} can not parse {media_type}")
        self.media_type = media_type

    def parse(self, text: str, base_iri: str) -> QuadStoreView:
        raise NotImplementedError


class RdflibDocumentParser(BaseDocumentParser):
    media_types = {
        "text/turtle": "turtle",
        "text/n3": "n3",
        "application/n-triples": "nt",
        "application/ld+json": "json-ld",
    }

    def parse(self, text, base_iri):
        store = DocumentOrderStore()
        g = rdflib.Graph(store=store, identifier=urldefrag(base_iri).url)
        try:
            g.parse(data=text, format=self.media_types[self.media_type], publicID=base_iri)
        except Exception as exc:
            # rdflib surfaces bad JSON-LD and refused context fetches as arbitrary errors
            logger.debug(f"{base_iri} is not valid {self.media_type}: {exc}")
            raise DocumentParseError(f"Failed to parse {base_iri}", url=base_iri) from exc

        return list(store.statements)


def get_parser(media_type: str) -> BaseDocumentParser:
    return app_settings.DOCUMENT_PARSER(media_type=media_type)
