"""
Cache of the language codes accepted by each MediaWiki API endpoint.
"""

import logging
import threading

from language_store.default_language_codes import DEFAULT_LANGUAGE_CODES
from mediawiki_api import LanguageCodeFetchError, MediaWikiAPI


logger = logging.getLogger(__name__)


class LanguageCodeStore:
    """
    Language codes per endpoint, fetched on first use and kept for the lifetime of
    the store.

    An endpoint that cannot be queried gets the default codes instead. The failure is
    logged and remembered, and the fetch is never retried.
    """

    def __init__(self, default_codes=DEFAULT_LANGUAGE_CODES, api_factory=MediaWikiAPI):
        """
        :param default_codes: codes used without an endpoint and as the fallback
        :param api_factory: callable creating an API client from an endpoint URL
        """
        self.default_codes = frozenset(default_codes)
        self.api_factory = api_factory
        self._codes = {}
        self._failures = {}
        self._endpoint_locks = {}
        self._lock = threading.Lock()

    def get_language_codes(self, endpoint=None):
        """
        Return the language codes accepted by `endpoint`.

        Without an endpoint, the default codes are returned and nothing is cached.
        This never raises: if the codes cannot be fetched, the default codes are
        cached for the endpoint and returned.

        :param endpoint: URL of the MediaWiki API, or None
        :return: frozenset of language codes
        """
        if endpoint is None:
            return self.default_codes

        with self._lock:
            if endpoint in self._codes:
                return self._codes[endpoint]
            endpoint_lock = self._endpoint_locks.setdefault(endpoint, threading.Lock())

        # Only one thread fetches a given endpoint, the others wait for its result.
        with endpoint_lock:
            with self._lock:
                if endpoint in self._codes:
                    return self._codes[endpoint]

            codes, failure = self._fetch(endpoint)

            with self._lock:
                self._codes[endpoint] = codes
                if failure is not None:
                    self._failures[endpoint] = failure
                del self._endpoint_locks[endpoint]
            return codes

    def _fetch(self, endpoint):
        """
        Fetch the codes for `endpoint`.

        :return: tuple of the codes to cache and the error that caused a fallback to
                 the default codes (None on success)
        """
        logger.info("Fetching language codes from %s", endpoint)
        try:
            return self.api_factory(endpoint).content_language_codes(), None
        except LanguageCodeFetchError as error:
            logger.error(
                "An error occurred when fetching language codes from %s (%s), "
                "falling back to the default language codes: %s",
                endpoint,
                type(error).__name__,
                error.message,
                exc_info=error,
            )
            return self.default_codes, error
        except Exception as error:
            logger.exception(
                "Unexpected error when fetching language codes from %s, "
                "falling back to the default language codes",
                endpoint,
            )
            return self.default_codes, error

    def fallback_reason(self, endpoint):
        """
        Return the exception that made `endpoint` fall back to the default codes.

        None if the endpoint has not been queried or the query succeeded.
        """
        with self._lock:
            return self._failures.get(endpoint)

    def cached_endpoints(self):
        """
        Return the set of endpoints whose codes have been stored.
        """
        with self._lock:
            return set(self._codes)


_default_store = LanguageCodeStore()


def get_language_codes(endpoint=None):
    """
    Return the language codes accepted by `endpoint`, using the process-wide store.
    """
    return _default_store.get_language_codes(endpoint)
