import httpretty
import requests
from rdflib import BNode, Literal, URIRef

from solidprofile.exceptions import DocumentParseError, DocumentResolutionError
from solidprofile.parsers import Quad
from solidprofile.resolvers import HttpDocumentResolver, extract
from solidprofile.schemas import FOAF, PIM_SPACE, VCARD
from solidprofile.signals import document_read
from tests.core.base import BaseTestCase, UnreachableHttp, use_document_file

ALICE = "https://alice.example/profile/card#me"
ALICE_DOCUMENT = "https://alice.example/profile/card"


class ExtractTestCase(BaseTestCase):
    def setUp(self):
        me = URIRef(ALICE)
        graph = URIRef(ALICE_DOCUMENT)
        self.quads = [
            Quad(me, URIRef(FOAF.name), Literal("Alice"), graph),
            Quad(me, URIRef(VCARD.fn), Literal("Alice A."), graph),
            Quad(me, URIRef(FOAF.name), Literal("Alicia"), graph),
        ]

    def test_returns_default_when_predicate_is_absent(self):
        default = object()
        self.assertIs(extract(self.quads, PIM_SPACE.storage, default), default)

    def test_returns_default_on_empty_view(self):
        self.assertEqual(extract([], FOAF.name, "nobody"), "nobody")

    def test_returns_first_match_in_document_order(self):
        self.assertEqual(extract(self.quads, FOAF.name, "nobody"), "Alice")
        self.assertEqual(extract(list(reversed(self.quads)), FOAF.name, "nobody"), "Alicia")

    def test_matches_predicate_strings(self):
        self.assertEqual(extract(self.quads, "http://www.w3.org/2006/vcard/ns#fn"), "Alice A.")

    def test_returns_iri_objects_as_strings(self):
        quads = [Quad(URIRef(ALICE), PIM_SPACE.storage, URIRef("https://alice.example/"), None)]
        value = extract(quads, PIM_SPACE.storage)
        self.assertEqual(value, "https://alice.example/")
        self.assertIs(type(value), str)

    def test_blank_node_objects_are_skipped(self):
        me = URIRef(ALICE)
        quads = [Quad(me, PIM_SPACE.storage, BNode(), None)]
        self.assertEqual(extract(quads, PIM_SPACE.storage, "none"), "none")

        quads.append(Quad(me, PIM_SPACE.storage, URIRef("https://alice.example/"), None))
        self.assertEqual(extract(quads, PIM_SPACE.storage, "none"), "https://alice.example/")


class HttpDocumentResolverTestCase(BaseTestCase):
    def setUp(self):
        self.resolver = HttpDocumentResolver()

    def test_uses_requests_by_default(self):
        self.assertIs(self.resolver.http, requests)

    def test_can_resolve_http_uris(self):
        self.assertTrue(self.resolver.can_resolve("https://alice.example/profile/card"))
        self.assertTrue(self.resolver.can_resolve("http://alice.example/profile/card"))
        self.assertFalse(self.resolver.can_resolve("urn:uuid:6e8bc430-9c3a-11d9-9669"))

    def test_refuses_other_schemes(self):
        with self.assertRaises(DocumentResolutionError):
            self.resolver.read("ftp://alice.example/profile/card")

    @httpretty.activate
    @use_document_file(ALICE_DOCUMENT, "profiles/alice.ttl")
    def test_can_read_profile(self):
        quads = self.resolver.read(ALICE)
        self.assertEqual(extract(quads, FOAF.name), "Alice")
        self.assertEqual(httpretty.last_request().headers["Accept"], "text/turtle")

    @httpretty.activate
    @use_document_file(ALICE_DOCUMENT, "profiles/alice.ttl", status=203)
    def test_any_success_status_is_read(self):
        self.assertNotEqual(self.resolver.read(ALICE), [])

    @httpretty.activate
    def test_error_statuses_are_empty_documents(self):
        for status in (401, 403, 404, 500, 503):
            with self.subTest(status=status):
                httpretty.register_uri(
                    httpretty.GET, ALICE_DOCUMENT, body="not found", status=status
                )
                self.assertListEqual(self.resolver.read(ALICE), [])

    @httpretty.activate
    @use_document_file(ALICE_DOCUMENT, "profiles/broken.ttl", status=404)
    def test_error_bodies_are_not_parsed(self):
        self.assertListEqual(self.resolver.read(ALICE), [])

    @httpretty.activate
    @use_document_file(ALICE_DOCUMENT, "profiles/broken.ttl")
    def test_malformed_document_fails(self):
        with self.assertRaises(DocumentParseError):
            self.resolver.read(ALICE)

    @httpretty.activate
    @use_document_file(
        "https://carol.example/profile/card",
        "profiles/carol.jsonld",
        content_type="application/ld+json",
    )
    def test_can_request_other_media_types(self):
        quads = self.resolver.read(
            "https://carol.example/profile/card#me", accept="application/ld+json"
        )
        self.assertEqual(extract(quads, FOAF.name), "Carol")
        self.assertEqual(httpretty.last_request().headers["Accept"], "application/ld+json")

    def test_network_errors_propagate(self):
        resolver = HttpDocumentResolver(http=UnreachableHttp())
        with self.assertRaises(requests.ConnectionError):
            resolver.read(ALICE)

    @httpretty.activate
    @use_document_file(ALICE_DOCUMENT, "profiles/alice.ttl")
    def test_notifies_document_read(self):
        received = []

        def handler(sender, url, quads, **kw):
            received.append((url, len(quads)))

        document_read.connect(handler)
        try:
            quads = self.resolver.read(ALICE)
        finally:
            document_read.disconnect(handler)

        self.assertListEqual(received, [(ALICE, len(quads))])
