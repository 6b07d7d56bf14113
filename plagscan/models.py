from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Metadata(BaseModel):
    """Page metadata; None marks a field the page did not provide."""
    description: Optional[str] = None
    keywords: Optional[str] = None
    author: Optional[str] = None
    publishedDate: Optional[str] = None
    lastModified: Optional[str] = None
    language: Optional[str] = None

    def completeness(self) -> float:
        """Fraction of fields that are present and non-empty"""
        values = list(self.model_dump().values())
        return sum(1 for v in values if v) / len(values)


class Document(BaseModel):
    url: str
    title: str = "Untitled"
    snippet: str = ""
    rawText: str = ""
    metadata: Metadata = Field(default_factory=Metadata)


class TextStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    wordCount: int = 0
    characterCount: int = 0
    sentenceCount: int = 0
    uniqueWordCount: int = 0
    averageWordLength: str = "0.00"
    lexicalDensity: str = "0.00"
    averageWordsPerSentence: str = "0.00"

    @classmethod
    def empty(cls) -> "TextStatistics":
        return cls()


class SentimentResult(BaseModel):
    score: int = 0
    comparative: float = 0.0
    tokens: List[str] = []
    positive: List[str] = []
    negative: List[str] = []


class SourceResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    title: str
    snippet: str = ""
    metadata: Metadata
    similarity: float
    similarityPercent: float
    confidenceScore: float
    isPlagiarized: bool
    textAnalysis: TextStatistics


class ReportSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    maxSimilarity: str
    maxConfidence: str
    averageSimilarity: str
    averageConfidence: str
    overallPlagiarized: bool
    plagiarizedSources: int
    totalSourcesAnalyzed: int
    highConfidenceSources: int
    mostLikelySource: Optional[str] = None
    mostLikelySourceConfidence: float = 0.0


class SubmittedContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str
    textStats: TextStatistics
    sentiment: SentimentResult
    wordCount: int
    characterCount: int


class Report(BaseModel):
    model_config = ConfigDict(frozen=True)

    submitted: SubmittedContent
    sources: List[SourceResult]
    summary: ReportSummary
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CheckRequest(BaseModel):
    content: str
    candidates: List[Document] = []


class PlagiarismResponse(BaseModel):
    status: str = "success"
    data: Report


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str
