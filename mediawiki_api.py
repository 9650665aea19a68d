import logging

import requests
from requests.exceptions import HTTPError, RequestException


logger = logging.getLogger(__name__)


class MediaWikiAPI:
    """
    An API client for reading Wikibase metadata from a MediaWiki API endpoint.
    """

    def __init__(self, endpoint, timeout=None):
        """
        :param endpoint: URL of the API, e.g. https://www.wikidata.org/w/api.php
        :param timeout: request timeout in seconds, None for no timeout
        """
        self.endpoint = endpoint
        self.timeout = timeout

    def _make_request(self, params):
        """
        Make a GET request to the endpoint and return the decoded JSON body.

        :param params: A dictionary of query parameters to include in the request URL.

        :return: the parsed response body
        :raises LanguageCodeFetchError: if the request fails or the body is not JSON
        """
        try:
            response = requests.get(self.endpoint, params=params, timeout=self.timeout)
            response.raise_for_status()
        except HTTPError as error:
            raise ProtocolError(self.endpoint, f"HTTP error: {error}") from error
        except RequestException as error:
            raise TransportError(self.endpoint, f"request failed: {error}") from error

        logger.debug("GET %s returned %s", response.url, response.status_code)

        content_type = response.headers.get("Content-Type")
        if content_type and "json" not in content_type:
            raise ProtocolError(
                self.endpoint, f"unexpected content type {content_type!r}"
            )

        try:
            return response.json()
        except (ValueError, RecursionError) as error:
            raise MalformedResponseError(
                self.endpoint, f"response is not valid JSON: {error}"
            ) from error

    def content_language_codes(self):
        """
        Fetch the language codes the Wikibase instance accepts for monolingual text.

        The content languages are listed under `query.wbcontentlanguages`. MediaWiki
        returns them as an object keyed by code, but a list of entries is accepted
        too. Only the `code` field of each entry is used. An empty listing is a valid
        result.

        :return: frozenset of language codes
        """
        params = {
            "action": "query",
            "meta": "wbcontentlanguages",
            "wbclprop": "code",
            "wbclcontext": "monolingualtext",
            "format": "json",
        }
        data = self._make_request(params)

        try:
            languages = data["query"]["wbcontentlanguages"]
        except (KeyError, TypeError) as error:
            raise MalformedResponseError(
                self.endpoint, "query.wbcontentlanguages not found in response"
            ) from error

        if isinstance(languages, dict):
            languages = languages.values()
        elif not isinstance(languages, list):
            raise MalformedResponseError(
                self.endpoint,
                f"query.wbcontentlanguages is a {type(languages).__name__}, "
                "expected an object or a list",
            )

        codes = set()
        for language in languages:
            code = language.get("code") if isinstance(language, dict) else None
            if not isinstance(code, str):
                raise MalformedResponseError(
                    self.endpoint,
                    f"content language entry without a code: {language!r}",
                )
            codes.add(code)

        logger.debug("Received %d language codes from %s", len(codes), self.endpoint)
        return frozenset(codes)


class LanguageCodeFetchError(Exception):
    """
    Fetching language codes from a MediaWiki API endpoint failed.
    """

    def __init__(self, endpoint, message):
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint
        self.message = message


class TransportError(LanguageCodeFetchError):
    """
    The endpoint could not be reached (connection, DNS, timeout, invalid URL).
    """


class ProtocolError(LanguageCodeFetchError):
    """
    The endpoint answered with an error status or something other than JSON.
    """


class MalformedResponseError(LanguageCodeFetchError):
    """
    The response body did not have the expected structure.
    """
