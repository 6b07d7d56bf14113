import pytest
import requests

from plagscan.web_search import SearchHit, WebSearchClient, parse_document

PAGE = """
<html lang="en">
<head>
  <title> Foxes of the World </title>
  <meta name="description" content="All about foxes">
  <meta name="author" content="Jane Roe">
  <meta name="keywords" content="   ">
  <meta property="article:published_time" content="2021-03-04T00:00:00Z">
  <script>var tracking = 1;</script>
</head>
<body><h1>Foxes</h1><p>The quick brown fox jumps.</p></body>
</html>
"""

HIT = SearchHit(url="https://example.com/foxes", title="Foxes", snippet="about foxes")


class FakeResponse:
    def __init__(self, payload=None, text="", status_code=200):
        self._payload = payload
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


class FakeSession(requests.Session):
    def __init__(self, routes):
        super().__init__()
        self.routes = routes
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append(url)
        route = self.routes.get(url)
        if isinstance(route, Exception):
            raise route
        if route is None:
            raise requests.ConnectionError(f"no route for {url}")
        return route


def test_parse_document_extracts_text_and_metadata():
    doc = parse_document(HIT, PAGE)

    assert doc.url == HIT.url
    assert doc.title == "Foxes of the World"
    assert doc.snippet == "about foxes"
    assert "The quick brown fox jumps." in doc.rawText
    assert "tracking" not in doc.rawText
    assert doc.metadata.description == "All about foxes"
    assert doc.metadata.author == "Jane Roe"
    assert doc.metadata.publishedDate == "2021-03-04T00:00:00Z"
    assert doc.metadata.language == "en"
    # blank or missing fields stay absent
    assert doc.metadata.keywords is None
    assert doc.metadata.lastModified is None


def test_parse_document_without_title_falls_back_to_hit():
    doc = parse_document(HIT, "<html><body>text only</body></html>")

    assert doc.title == "Foxes"
    assert doc.metadata.completeness() == 0.0


def test_search_prefers_wikipedia_and_deduplicates():
    session = FakeSession({
        "https://en.wikipedia.org/w/rest.php/v1/search/page": FakeResponse({
            "pages": [
                {"key": "Red_fox", "title": "Red fox", "description": "Species of fox"},
                {"key": "", "title": "broken"},
            ]
        }),
        "https://api.duckduckgo.com/": FakeResponse({
            "AbstractURL": "https://en.wikipedia.org/wiki/Red_fox",
            "Heading": "Red fox",
            "Abstract": "The red fox is...",
            "RelatedTopics": [
                {"FirstURL": "https://duckduckgo.com/Arctic_fox", "Text": "Arctic fox"},
                {"Name": "grouped topics"},
            ],
        }),
    })
    client = WebSearchClient(session=session, timeout=1)

    hits = client.search("red fox habitat", limit=5)

    assert [h.url for h in hits] == [
        "https://en.wikipedia.org/wiki/Red_fox",
        "https://duckduckgo.com/Arctic_fox",
    ]
    assert hits[0].snippet == "Species of fox"


def test_search_network_failure_returns_empty():
    client = WebSearchClient(session=FakeSession({}), timeout=1)
    assert client.search("anything at all") == []


def test_search_invalid_query():
    session = FakeSession({})
    client = WebSearchClient(session=session)

    assert client.search("") == []
    assert client.search(None) == []
    assert session.calls == []


def test_fetch_content_failure_returns_none():
    session = FakeSession({HIT.url: FakeResponse(text="gone", status_code=503)})
    client = WebSearchClient(session=session)

    assert client.fetch_content(HIT) is None


@pytest.mark.asyncio
async def test_search_and_fetch_drops_failed_pages():
    good = SearchHit(url="https://good.example", title="Good", snippet="")
    bad = SearchHit(url="https://bad.example", title="Bad", snippet="")
    session = FakeSession({good.url: FakeResponse(text=PAGE)})
    client = WebSearchClient(session=session)
    client.search = lambda query, limit=None: [bad, good]

    documents = await client.search_and_fetch("foxes", limit=5)

    assert [d.url for d in documents] == ["https://good.example"]
