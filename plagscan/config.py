"""Configuration settings for plagscan."""

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Scoring thresholds
    plagiarism_threshold: float = 0.6  # similarity fraction
    high_confidence_threshold: float = 70.0  # confidence points

    # Candidate fan-out
    max_candidates: int = 5
    max_concurrency: int = 5

    # Request validation
    min_content_length: int = 10
    query_chars: int = 100

    # Search / fetch collaborator
    request_timeout: float = 5.0  # seconds
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )

    # Server
    cors_origins: List[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False

    class Config:
        env_prefix = "PLAGSCAN_"
        env_file = ".env"


settings = Settings()
