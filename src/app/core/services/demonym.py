"""Demonym enrichment backed by the RestCountries API."""
import logging
from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)


class DemonymForms(BaseModel):
    """Gendered demonym forms for one language, e.g. {"m": "American", "f": "American"}."""
    m: str | None = None
    f: str | None = None


class CountryInfo(BaseModel):
    """The subset of a RestCountries country object used for enrichment."""
    demonyms: dict[str, DemonymForms] | None = Field(default=None)

    def demonym(self, language: str) -> str | None:
        """
        Return the demonym for a language: the male form, else the female form.

        There is no fallback to other languages.
        """
        if not self.demonyms:
            return None
        forms = self.demonyms.get(language)
        if forms is None:
            return None
        for value in (forms.m, forms.f):
            if value and value.strip():
                return value.strip()
        return None


_countries_adapter = TypeAdapter(list[CountryInfo])


class CountryLookupError(Exception):
    """Raised when the country lookup fails (transport, status or payload)."""
    pass


class DemonymResolver(ABC):
    """Abstract base class for demonym lookup."""

    @abstractmethod
    async def resolve(self, country_code: str | None) -> str | None:
        """
        Resolve the demonym for a country code.

        Args:
            country_code: ISO 3166-1 alpha-2 or alpha-3 code.

        Returns:
            The demonym, or None when it cannot be determined. Never raises.
        """
        pass


class RestCountriesDemonymResolver(DemonymResolver):
    """Demonym resolver calling GET {base_url}/alpha/{code} on RestCountries."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        language: str = "eng",
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            base_url: RestCountries base URL (e.g. "https://restcountries.com/v3.1").
            timeout: Timeout in seconds applied to every lookup.
            language: Demonym language key to extract.
            client: Optional shared httpx.AsyncClient. If not provided, a
                short-lived client is opened for each lookup.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.language = language
        self._client = client

    async def resolve(self, country_code: str | None) -> str | None:
        if not country_code or not country_code.strip():
            return None

        try:
            countries = await self.fetch_countries(country_code.strip())
        except CountryLookupError as e:
            logger.warning("Demonym lookup failed for country '%s': %s", country_code, e)
            return None

        if not countries:
            logger.info("No country data returned for '%s'", country_code)
            return None

        demonym = countries[0].demonym(self.language)
        if demonym is None:
            logger.info("No '%s' demonym available for country '%s'", self.language, country_code)
        return demonym

    async def fetch_countries(self, country_code: str) -> list[CountryInfo]:
        """
        Fetch the country entries for a code.

        Raises:
            CountryLookupError: On transport errors, timeouts, non-2xx responses
                or a payload that is not a list of country objects.
        """
        url = f"{self.base_url}/alpha/{quote(country_code, safe='')}"
        try:
            if self._client is not None:
                response = await self._client.get(url, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise CountryLookupError(f"RestCountries request failed: {e}") from e
        except ValueError as e:
            raise CountryLookupError(f"RestCountries returned invalid JSON: {e}") from e

        return self._parse(payload)

    @staticmethod
    def _parse(payload: Any) -> list[CountryInfo]:
        # Some endpoints return a bare object instead of a one-element list
        if isinstance(payload, dict):
            payload = [payload]
        try:
            return _countries_adapter.validate_python(payload)
        except ValidationError as e:
            raise CountryLookupError(f"Unexpected RestCountries payload: {e}") from e
