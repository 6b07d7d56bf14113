import asyncio
from typing import List, Optional, Sequence

from plagscan.config import settings
from plagscan.confidence import calculate_confidence_score
from plagscan.errors import ComputationFailure, InsufficientSources, InvalidInput
from plagscan.logging_config import get_logger
from plagscan.models import (
    Document,
    Report,
    ReportSummary,
    SourceResult,
    SubmittedContent,
)
from plagscan.sentiment import AfinnSentimentAnalyzer, SentimentAnalyzer
from plagscan.utils.text_processor import analyze_text, to_fixed, tokenize
from plagscan.utils.vectors import TermVector, cosine_similarity, vectorize
from plagscan.web_search import WebSearchClient

logger = get_logger('checker')


def validate_content(text) -> List[str]:
    """
    Reject submissions the pipeline cannot analyze; returns the tokens
    """
    if not text:
        raise InvalidInput("Content parameter is required")
    if not isinstance(text, str):
        raise InvalidInput("Content must be a string")
    if len(text) < settings.min_content_length:
        raise InvalidInput(
            f"Content must be at least {settings.min_content_length} characters long"
        )
    tokens = tokenize(text)
    if not tokens:
        raise InvalidInput("No valid content to analyze after processing")
    return tokens


class PlagiarismChecker:
    def __init__(
        self,
        search_client: Optional[WebSearchClient] = None,
        sentiment_analyzer: Optional[SentimentAnalyzer] = None,
        max_concurrency: Optional[int] = None,
    ):
        self.search_client = search_client or WebSearchClient()
        self.sentiment_analyzer = sentiment_analyzer or AfinnSentimentAnalyzer()
        self.max_concurrency = max_concurrency or settings.max_concurrency

    async def check_text(self, text: str) -> Report:
        """
        Main plagiarism checking function: search the web for the opening of
        the text, fetch the candidates and score against them
        """
        validate_content(text)

        query = text[:settings.query_chars]
        logger.info("Searching candidates for %r", query[:60])
        candidates = await self.search_client.search_and_fetch(
            query, limit=settings.max_candidates
        )
        logger.info("Fetched %d candidate documents", len(candidates))

        return await self.score_against_candidates(text, candidates)

    def check(self, text: str, candidates: Sequence[Document]) -> Report:
        """Blocking wrapper around score_against_candidates"""
        return asyncio.run(self.score_against_candidates(text, candidates))

    async def score_against_candidates(
        self, submitted_text: str, candidates: Sequence[Document]
    ) -> Report:
        """
        Score the submitted text against every candidate concurrently.

        Candidates that fail are dropped. Raises InsufficientSources when
        there is nothing left to report on.
        """
        if not candidates:
            raise InsufficientSources("No comparison sources found")

        tokens = tokenize(submitted_text)
        submitted_vector = vectorize(tokens)

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def run(index: int, candidate: Document):
            async with semaphore:
                return await asyncio.to_thread(
                    self._evaluate_candidate, index, submitted_text, submitted_vector, candidate
                )

        outcomes = await asyncio.gather(
            *(run(i, c) for i, c in enumerate(candidates)),
            return_exceptions=True,
        )

        scored = []
        for index, outcome in enumerate(outcomes):
            if isinstance(outcome, BaseException):
                logger.warning("Dropping candidate %d: %s", index, outcome)
                continue
            scored.append((index, outcome))

        if not scored:
            raise InsufficientSources("No valid results found after analysis")

        # confidence descending, original candidate order breaks ties
        scored.sort(key=lambda pair: (-pair[1].confidenceScore, pair[0]))
        sources = [result for _, result in scored]

        submitted = SubmittedContent(
            content=submitted_text,
            textStats=analyze_text(submitted_text),
            sentiment=self.sentiment_analyzer.analyze(submitted_text),
            wordCount=len(tokens),
            characterCount=len(submitted_text),
        )

        logger.info(
            "Analyzed %d/%d sources, top confidence %.2f",
            len(sources), len(candidates), sources[0].confidenceScore,
        )
        return Report(submitted=submitted, sources=sources, summary=summarize(sources))

    def _evaluate_candidate(
        self,
        index: int,
        submitted_text: str,
        submitted_vector: TermVector,
        candidate: Document,
    ) -> SourceResult:
        try:
            content_vector = vectorize(tokenize(candidate.rawText))
            similarity = cosine_similarity(submitted_vector, content_vector)
            text_analysis = analyze_text(candidate.rawText)
            confidence = calculate_confidence_score(
                similarity, text_analysis, candidate.metadata,
                submitted_text, candidate.rawText,
            )
        except ComputationFailure:
            raise
        except Exception as e:
            raise ComputationFailure(
                f"Candidate {index} could not be scored: {e}",
                url=getattr(candidate, 'url', None),
            ) from e

        logger.debug("%s: similarity %.4f, confidence %.2f", candidate.url, similarity, confidence)

        return SourceResult(
            url=candidate.url,
            title=candidate.title,
            snippet=candidate.snippet,
            metadata=candidate.metadata,
            similarity=similarity,
            similarityPercent=round(similarity * 100, 2),
            confidenceScore=confidence,
            isPlagiarized=similarity > settings.plagiarism_threshold,
            textAnalysis=text_analysis,
        )


def summarize(sources: List[SourceResult]) -> ReportSummary:
    """Summary statistics over sources already sorted by confidence"""
    similarities = [s.similarityPercent for s in sources]
    confidences = [s.confidenceScore for s in sources]
    max_similarity = max(similarities)
    top = sources[0]

    return ReportSummary(
        maxSimilarity=to_fixed(max_similarity),
        maxConfidence=to_fixed(max(confidences)),
        averageSimilarity=to_fixed(sum(similarities) / len(similarities)),
        averageConfidence=to_fixed(sum(confidences) / len(confidences)),
        overallPlagiarized=max_similarity > settings.plagiarism_threshold * 100,
        plagiarizedSources=sum(1 for s in sources if s.isPlagiarized),
        totalSourcesAnalyzed=len(sources),
        highConfidenceSources=sum(
            1 for s in sources if s.confidenceScore > settings.high_confidence_threshold
        ),
        mostLikelySource=top.url,
        mostLikelySourceConfidence=top.confidenceScore,
    )


async def score_against_candidates(
    submitted_text: str, candidates: Sequence[Document]
) -> Report:
    checker = PlagiarismChecker()
    return await checker.score_against_candidates(submitted_text, candidates)
