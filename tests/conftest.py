import json
import yaml

from click.testing import CliRunner
import pytest
import requests
import requests_mock

from language_store.language_code_store import LanguageCodeStore


@pytest.fixture(autouse=True)
def prevent_online_http_requests(monkeypatch):
    """
    Patch urlopen so that all non-patched requests raise an error.
    """

    def urlopen_error(self, method, url, *args, **kwargs):
        raise RuntimeError(
            f"Requests are not allowed in tests, but a test attempted a "
            f"{method} request to {self.scheme}://{self.host}{url}"
        )

    monkeypatch.setattr(
        "urllib3.connectionpool.HTTPConnectionPool.urlopen", urlopen_error
    )


@pytest.fixture
def shared_request_mocker():
    """
    Shared requests_mock.Mocker for all request mocking in tests

    When mocking multiple requests for one test, all mocking must be done using one
    Mocker object.
    """
    with requests_mock.Mocker() as m:
        yield m


def _get_json_file(filename):
    """Return the contents of given JSON file."""
    with open(filename) as infile:
        return json.load(infile)


@pytest.fixture
def mediawiki_api_endpoint():
    """MediaWiki API of a Wikibase instance"""
    return "https://wikibase.example.org/w/api.php"


@pytest.fixture
def other_mediawiki_api_endpoint():
    """MediaWiki API of another Wikibase instance"""
    return "https://other-wikibase.example.org/w/api.php"


@pytest.fixture
def content_languages_response_json():
    """
    Content languages of a small Wikibase instance.

    Lists en, fi, izh, se, smn and sv. Of these, izh is not among the default codes.
    """
    return _get_json_file("tests/test_data/wbcontentlanguages_response.json")


@pytest.fixture
def content_language_codes():
    """The codes listed in `content_languages_response_json`"""
    return frozenset(["en", "fi", "izh", "se", "smn", "sv"])


@pytest.fixture
def mock_content_languages(
    shared_request_mocker, mediawiki_api_endpoint, content_languages_response_json
):
    """
    Make the Wikibase instance list its content languages.
    """
    shared_request_mocker.get(
        mediawiki_api_endpoint,
        json=content_languages_response_json,
        headers={"Content-Type": "application/json; charset=utf-8"},
    )
    return shared_request_mocker


@pytest.fixture
def mock_empty_content_languages(shared_request_mocker, mediawiki_api_endpoint):
    """
    Make the Wikibase instance report that it has no content languages.
    """
    shared_request_mocker.get(
        mediawiki_api_endpoint,
        json=_get_json_file("tests/test_data/wbcontentlanguages_empty_response.json"),
    )
    return shared_request_mocker


@pytest.fixture
def mock_mediawiki_without_wikibase(shared_request_mocker, mediawiki_api_endpoint):
    """
    Make the endpoint answer like a MediaWiki without the Wikibase extension.
    """
    shared_request_mocker.get(
        mediawiki_api_endpoint,
        json=_get_json_file("tests/test_data/mediawiki_error_response.json"),
    )
    return shared_request_mocker


@pytest.fixture
def mock_unreachable_endpoint(shared_request_mocker, mediawiki_api_endpoint):
    """
    Make connecting to the endpoint fail.
    """
    shared_request_mocker.get(
        mediawiki_api_endpoint, exc=requests.exceptions.ConnectTimeout
    )
    return shared_request_mocker


@pytest.fixture
def language_code_store():
    """
    A fresh store, so that nothing is cached between tests.
    """
    return LanguageCodeStore()


@pytest.fixture
def create_test_config_file(tmp_path):
    """
    Factory helper for configuration files to be used in tests.
    """

    def _create_config(configuration_data):
        """
        Write the given configuration data into a temporary config file.

        :return: path to the newly-created config file as a string
        """
        config_filename = tmp_path / "config.yml"
        with open(config_filename, "w") as config_file:
            yaml.dump(configuration_data, stream=config_file)
        return str(config_filename)

    return _create_config


@pytest.fixture
def default_test_log_file_path(tmp_path):
    return tmp_path / "language_codes_test.log"


@pytest.fixture
def basic_configuration(
    create_test_config_file, default_test_log_file_path, mediawiki_api_endpoint
):
    """
    Create a basic well-formed configuration file and return its path.
    """
    return create_test_config_file(
        {
            "mediawiki_api_endpoint": mediawiki_api_endpoint,
            "log_file": str(default_test_log_file_path),
        }
    )


@pytest.fixture
def run_cli(basic_configuration):
    """
    Helper for running the command line interface with given arguments.

    If the configuration file is not specified, the basic configuration is used.
    """

    def _run_cli(cli_function, configuration_file_path=None, extra_args=None):
        if configuration_file_path is None:
            configuration_file_path = basic_configuration

        required_args = [str(configuration_file_path)]
        if not extra_args:
            extra_args = []

        runner = CliRunner()
        return runner.invoke(cli_function, required_args + extra_args)

    return _run_cli
