import pytest

from plagscan.models import Document, Metadata

FIFTEEN_WORDS = (
    "alpha beta gamma delta epsilon zeta eta theta "
    "iota kappa lambda omicron sigma tau upsilon"
)


class FakeSearchClient:
    """Stands in for WebSearchClient; returns canned documents"""

    def __init__(self, documents=None):
        self.documents = documents or []
        self.queries = []

    async def search_and_fetch(self, query, limit=None):
        self.queries.append(query)
        return list(self.documents)


@pytest.fixture
def make_document():
    def _make(text, url="https://example.com/page", metadata=None, title="Example"):
        return Document(
            url=url,
            title=title,
            snippet=text[:40],
            rawText=text,
            metadata=metadata or Metadata(),
        )
    return _make


@pytest.fixture
def full_metadata():
    return Metadata(
        description="A page",
        keywords="fox, dog",
        author="Jane Roe",
        publishedDate="2020-01-01",
        lastModified="2020-02-01",
        language="en",
    )
