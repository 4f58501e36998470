# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from timelane import configuration
from timelane import state as app_state
from timelane.log import configure_logging
from timelane.repository.configuration import CONFIGURATION_REPO


def initialize() -> None:
    configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)

    __ensure_config_file()

    config = CONFIGURATION_REPO.get_config()
    app_state.set_show_header(config["show_header"])
    configure_logging(config["log_level"])


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))
