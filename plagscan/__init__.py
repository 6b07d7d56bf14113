"""Lexical plagiarism scoring against candidate source documents."""

from plagscan.errors import ComputationFailure, InsufficientSources, InvalidInput
from plagscan.models import Document, Metadata, Report
from plagscan.plagiarism_checker import PlagiarismChecker, score_against_candidates

__all__ = [
    "ComputationFailure",
    "Document",
    "InsufficientSources",
    "InvalidInput",
    "Metadata",
    "PlagiarismChecker",
    "Report",
    "score_against_candidates",
]
