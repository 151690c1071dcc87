import os

from swapvm.conf import UNITTESTS_SETTINGS_FILEPATH
from swapvm_cli.util import LoggingOptions, LoggingOutput, setup_logging

os.environ['SWAPVM_CONFIG_YAML'] = os.environ.get('SWAPVM_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# the CLI tests read stdout, keep it free of log lines
setup_logging(logging_output=LoggingOutput.NULL, logging_options=LoggingOptions(debug=False))
