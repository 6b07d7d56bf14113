"""Error taxonomy for the plagiarism scoring pipeline."""


class PlagiarismError(Exception):
    """Base class for plagscan errors"""


class InvalidInput(PlagiarismError):
    """Submitted text is missing, not a string, or too short to analyze."""


class InsufficientSources(PlagiarismError):
    """No usable candidate documents were left to compare against."""


class ComputationFailure(PlagiarismError):
    """Scoring one candidate failed; the candidate is dropped from the report."""

    def __init__(self, message: str, url: str = None):
        super().__init__(message)
        self.url = url
