"""
Helpers for verifying that a language code is accepted by a Wikibase instance.
"""

from language_store import language_code_store


def language_code_supported(language_code, endpoint=None, store=None):
    """
    Check whether given language code can be used for terms and monolingual text.

    The codes are those for monolingual text, which is a larger set than what
    Wikibase accepts for labels, descriptions and aliases.

    :param language_code: code to check, e.g. "fi" or "sr-el"
    :param endpoint: MediaWiki API of the target Wikibase, None for the default codes
    :param store: LanguageCodeStore to use instead of the process-wide one
    """
    if store is None:
        return language_code in language_code_store.get_language_codes(endpoint)
    return language_code in store.get_language_codes(endpoint)
