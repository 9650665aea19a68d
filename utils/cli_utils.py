import yaml


def config_from_file(config_file):
    """
    Read the YAML configuration from given file and return as a dict.

    If the configuration file is malformed or missing some mandatory values, an
    exception is raised. A missing `request_timeout` is set to None, meaning that
    requests do not time out.
    """
    try:
        config = yaml.load(config_file, Loader=yaml.SafeLoader)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Given configuration file does not seem to be in YAML format: "
            f"{e}. See config/template.yml for valid configuration "
            "file example."
        )

    if not isinstance(config, dict):
        raise ConfigurationError(
            "Unexpected configuration file structure. See config/template.yml for a "
            "valid configuration file example."
        )

    expected_configuration_values = [
        "mediawiki_api_endpoint",
        "log_file",
    ]

    for configuration_value in expected_configuration_values:
        if configuration_value not in config:
            raise ConfigurationError(
                f'Value for "{configuration_value}" not found in configuration file'
            )

    timeout = config.get("request_timeout")
    if timeout is not None and (
        isinstance(timeout, bool) or not isinstance(timeout, (int, float))
    ):
        raise ConfigurationError(
            f'"request_timeout" must be a number of seconds, got {timeout!r}'
        )
    config["request_timeout"] = timeout

    return config


class ConfigurationError(Exception):
    pass
