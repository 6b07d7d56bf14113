import asyncio
from typing import List, NamedTuple, Optional

import requests
from bs4 import BeautifulSoup

from plagscan.config import settings
from plagscan.logging_config import get_logger
from plagscan.models import Document, Metadata

logger = get_logger('web_search')

WIKIPEDIA_SEARCH_URL = "https://en.wikipedia.org/w/rest.php/v1/search/page"
DUCKDUCKGO_URL = "https://api.duckduckgo.com/"


class SearchHit(NamedTuple):
    url: str
    title: str
    snippet: str


def _meta_content(soup: BeautifulSoup, **attrs) -> Optional[str]:
    tag = soup.find('meta', attrs=attrs)
    if tag is None:
        return None
    content = (tag.get('content') or '').strip()
    return content or None


class WebSearchClient:
    """
    Finds candidate source pages for a query and downloads them.
    Network faults never propagate: searches return [] and fetches None.
    """

    def __init__(self, session: requests.Session = None, timeout: float = None):
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': settings.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        })
        self.timeout = timeout if timeout is not None else settings.request_timeout

    def search(self, query: str, limit: int = None) -> List[SearchHit]:
        """
        Wikipedia first, DuckDuckGo as backup; de-duplicated by URL
        """
        if not query or not isinstance(query, str):
            logger.warning("Invalid search query: %r", query)
            return []

        limit = limit or settings.max_candidates
        hits = self._search_wikipedia(query, limit)
        if len(hits) < limit:
            hits.extend(self._search_duckduckgo(query))

        seen = set()
        unique = []
        for hit in hits:
            if hit.url and hit.url not in seen:
                seen.add(hit.url)
                unique.append(hit)
        return unique[:limit]

    def _search_wikipedia(self, query: str, limit: int) -> List[SearchHit]:
        try:
            response = self.session.get(
                WIKIPEDIA_SEARCH_URL,
                params={"q": query, "limit": limit},
                timeout=self.timeout,
            )
            response.raise_for_status()
            pages = response.json().get('pages', [])
        except (requests.RequestException, ValueError) as e:
            logger.warning("Wikipedia search failed: %s", e)
            return []

        hits = []
        for page in pages:
            key = page.get('key', '')
            if not key:
                continue
            hits.append(SearchHit(
                url=f"https://en.wikipedia.org/wiki/{key}",
                title=page.get('title') or 'Untitled',
                snippet=page.get('description') or '',
            ))
        logger.debug("Wikipedia returned %d hits for %r", len(hits), query)
        return hits

    def _search_duckduckgo(self, query: str) -> List[SearchHit]:
        try:
            response = self.session.get(
                DUCKDUCKGO_URL,
                params={'q': query, 'format': 'json', 'no_html': 1, 'skip_disambig': 1},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("DuckDuckGo search failed: %s", e)
            return []

        hits = []
        if data.get('AbstractURL'):
            hits.append(SearchHit(
                url=data['AbstractURL'],
                title=data.get('Heading') or 'Untitled',
                snippet=data.get('Abstract') or '',
            ))
        for topic in data.get('RelatedTopics', []):
            if isinstance(topic, dict) and topic.get('FirstURL'):
                hits.append(SearchHit(
                    url=topic['FirstURL'],
                    title=topic.get('Text', '')[:80] or 'Untitled',
                    snippet=topic.get('Text', ''),
                ))
        return hits

    def fetch_content(self, hit: SearchHit) -> Optional[Document]:
        """Download one page and extract its text and metadata"""
        try:
            response = self.session.get(hit.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Error fetching content from %s: %s", hit.url, e)
            return None

        return parse_document(hit, response.text)

    async def search_and_fetch(self, query: str, limit: int = None) -> List[Document]:
        """Search, then fetch the hits concurrently; failed fetches are dropped"""
        limit = limit or settings.max_candidates
        hits = await asyncio.to_thread(self.search, query, limit)
        documents = await asyncio.gather(
            *(asyncio.to_thread(self.fetch_content, hit) for hit in hits[:limit])
        )
        return [doc for doc in documents if doc is not None]


def parse_document(hit: SearchHit, html: str) -> Document:
    soup = BeautifulSoup(html, 'html.parser')
    for tag in soup(['script', 'style', 'noscript']):
        tag.decompose()

    title = soup.title.get_text(strip=True) if soup.title else ''
    body = soup.body.get_text(separator=' ', strip=True) if soup.body else ''
    html_tag = soup.find('html')
    language = (html_tag.get('lang') or None) if html_tag else None

    return Document(
        url=hit.url,
        title=title or hit.title or 'Untitled',
        snippet=hit.snippet,
        rawText=body,
        metadata=Metadata(
            description=_meta_content(soup, name='description'),
            keywords=_meta_content(soup, name='keywords'),
            author=_meta_content(soup, name='author'),
            publishedDate=_meta_content(soup, property='article:published_time'),
            lastModified=_meta_content(soup, property='article:modified_time'),
            language=language,
        ),
    )
