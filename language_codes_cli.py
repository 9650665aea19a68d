"""
Command line tools for inspecting the language codes accepted by Wikibase instances.
"""

import functools
import logging
import os
import sys
from pathlib import Path

import click

from language_store.language_code_store import LanguageCodeStore
from language_store.language_validator import language_code_supported
from mediawiki_api import LanguageCodeFetchError, MediaWikiAPI
from utils import cli_utils


REFERENCE_ENDPOINT = "https://www.wikidata.org/w/api.php"
DEFAULT_CODES_MODULE = (
    Path(__file__).parent / "language_store" / "default_language_codes.py"
)


def setup_cli_logger(log_file_name):
    """
    Log everything from the language store and the API client to the given file.

    Calling this again with the same file does not add another handler.
    """
    log_file_path = os.path.abspath(log_file_name)
    file_handler = None
    for logger_name in ["language_store", "mediawiki_api"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        existing = [
            handler
            for handler in logger.handlers
            if isinstance(handler, logging.FileHandler)
            and handler.baseFilename == log_file_path
        ]
        if existing:
            file_handler = existing[0]
            continue

        if file_handler is None:
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
            )
        logger.addHandler(file_handler)

    return file_handler


def _store_and_endpoint(config_file, endpoint):
    """
    Read the configuration and build a store honouring its request timeout.

    :return: tuple of the store and the endpoint to query
    """
    try:
        config = cli_utils.config_from_file(config_file)
    except cli_utils.ConfigurationError as err:
        raise click.ClickException(str(err))

    setup_cli_logger(config["log_file"])

    store = LanguageCodeStore(
        api_factory=functools.partial(MediaWikiAPI, timeout=config["request_timeout"])
    )
    return store, endpoint or config["mediawiki_api_endpoint"]


def render_default_codes_module(codes, endpoint):
    """
    Return the source of `default_language_codes.py` listing the given codes.
    """
    lines = [
        '"""',
        "Language codes accepted when no MediaWiki API endpoint is known or reachable.",
        "",
        f"Snapshot of the monolingual text content languages of {endpoint}.",
        "Regenerate with `python language_codes_cli.py update-default-codes`.",
        '"""',
        "",
        "DEFAULT_LANGUAGE_CODES = frozenset(",
        "    [",
    ]
    lines.extend(f'        "{code}",' for code in sorted(codes))
    lines.extend(["    ]", ")", ""])
    return "\n".join(lines)


@click.group
def cli():
    """
    Tools for looking up the language codes accepted by Wikibase instances
    """


@cli.command
@click.argument("config_file", type=click.File("r"), default="config/config.yml")
@click.option("--endpoint", help="MediaWiki API to query instead of the configured one")
def list_codes(config_file, endpoint):
    """
    Print the accepted language codes, one per line.

    If the API cannot be queried, the built-in default codes are printed and the
    problem is logged.

    \b
    CONFIG_FILE Configuration file. See config/template.yml for example.
    """
    store, endpoint = _store_and_endpoint(config_file, endpoint)
    for code in sorted(store.get_language_codes(endpoint)):
        click.echo(code)

    failure = store.fallback_reason(endpoint)
    if failure:
        click.echo(f"Using default language codes: {failure}", err=True)


@cli.command
@click.argument("config_file", type=click.File("r"), default="config/config.yml")
@click.argument("language_codes", nargs=-1, required=True)
@click.option("--endpoint", help="MediaWiki API to query instead of the configured one")
def check(config_file, language_codes, endpoint):
    """
    Check whether the given language codes are accepted.

    Each code is printed with "supported" or "unsupported", separated by a tab. The
    exit status is 1 if any of the codes is unsupported.

    \b
    CONFIG_FILE    Configuration file. See config/template.yml for example.
    LANGUAGE_CODES Codes to check, e.g. fi sv se
    """
    store, endpoint = _store_and_endpoint(config_file, endpoint)

    unsupported = 0
    for code in language_codes:
        if language_code_supported(code, endpoint=endpoint, store=store):
            click.echo(f"{code}\tsupported")
        else:
            unsupported += 1
            click.echo(f"{code}\tunsupported")

    if unsupported:
        sys.exit(1)


@cli.command
@click.option(
    "--endpoint",
    default=REFERENCE_ENDPOINT,
    show_default=True,
    help="MediaWiki API whose codes become the defaults",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CODES_MODULE,
    help="Python module to write, defaults to the one shipped with this tool",
)
def update_default_codes(endpoint, output):
    """
    Regenerate the built-in default language codes from a Wikibase instance.

    The module is only written if the codes were fetched successfully.
    """
    try:
        codes = MediaWikiAPI(endpoint).content_language_codes()
    except LanguageCodeFetchError as error:
        raise click.ClickException(f"Could not fetch language codes: {error}")

    if not codes:
        raise click.ClickException(
            f"{endpoint} did not list any language codes, not updating {output}"
        )

    output.write_text(render_default_codes_module(codes, endpoint))
    click.echo(f"Wrote {len(codes)} language codes to {output}")


if __name__ == "__main__":
    cli()  # pylint: disable=no-value-for-parameter
