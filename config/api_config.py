"""
Configuration for the upstream results API and the headshot image host.
Every value can be overridden through environment variables.
"""
import os

from constants.ergast_api_endpoints import ERGAST_BASE_URL, HEADSHOT_URL_TEMPLATE


class ApiConfig:
    """Results API configuration class with environment variable support."""

    ERGAST_BASE_URL: str = os.getenv("ERGAST_BASE_URL", ERGAST_BASE_URL)
    F1_SEASON: str = os.getenv("F1_SEASON", "current")
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "10"))
    HEADSHOT_URL_TEMPLATE: str = os.getenv("HEADSHOT_URL_TEMPLATE", HEADSHOT_URL_TEMPLATE)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def get_base_url(cls) -> str:
        """Base url without a trailing slash so paths can be joined with one."""
        return cls.ERGAST_BASE_URL.rstrip("/")

    @classmethod
    def get_client_params(cls) -> dict:
        """
        Get keyword arguments for building a RaceRepositoryClient.
        Returns dict instead of a client so callers can add a transport.
        """
        return {
            "base_url": cls.get_base_url(),
            "season": cls.F1_SEASON,
            "timeout": cls.HTTP_TIMEOUT,
            "headshot_url_template": cls.HEADSHOT_URL_TEMPLATE,
        }
