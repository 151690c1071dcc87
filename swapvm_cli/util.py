# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import json
import os
import sys
from argparse import ArgumentParser, Namespace
from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any, NamedTuple, NoReturn

import configargparse
import structlog
from typing_extensions import assert_never

from swapvm.registry import OpcodeRegistry


def create_parser(*, prefix: str | None = None, add_help: bool = True) -> ArgumentParser:
    return configargparse.ArgumentParser(auto_env_var_prefix=prefix or 'swapvm_', add_help=add_help)


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


class LoggingOptions(NamedTuple):
    debug: bool


def process_logging_output(argv: list[str]) -> LoggingOutput:
    """Extract logging output before argv parsing."""
    parser = create_parser(add_help=False)

    log_args = parser.add_mutually_exclusive_group()
    log_args.add_argument('--json-logs', action='store_true')
    log_args.add_argument('--disable-logs', action='store_true')

    args, remaining_argv = parser.parse_known_args(argv)
    argv.clear()
    argv.extend(remaining_argv)

    if args.json_logs:
        return LoggingOutput.JSON

    if args.disable_logs:
        return LoggingOutput.NULL

    return LoggingOutput.PRETTY


def process_logging_options(argv: list[str]) -> LoggingOptions:
    """Extract logging-specific options that are processed before argv parsing."""
    parser = create_parser(add_help=False)
    parser.add_argument('--debug', action='store_true')

    args, remaining_argv = parser.parse_known_args(argv)
    argv.clear()
    argv.extend(remaining_argv)

    return LoggingOptions(debug=args.debug)


def setup_logging(
    *,
    logging_output: LoggingOutput,
    logging_options: LoggingOptions,
    _test_logging: bool = False,
) -> None:
    import logging.config

    # common timestamper for structlog loggers and foreign (stdlib) loggers
    timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")

    # processors for foreign loggers
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    match logging_output:
        case LoggingOutput.NULL:
            handlers = ['null']
        case LoggingOutput.PRETTY:
            handlers = ['pretty']
        case LoggingOutput.JSON:
            handlers = ['json']
        case _:
            assert_never(logging_output)

    # Logs go to stderr, stdout is reserved for the command output.
    # See: https://docs.python.org/3/library/logging.config.html#configuration-dictionary-schema
    logging.config.dictConfig({
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'colored': {
                    '()': structlog.stdlib.ProcessorFormatter,
                    'processor': structlog.dev.ConsoleRenderer(colors=True),
                    'foreign_pre_chain': pre_chain,
                },
                'json': {
                    '()': structlog.stdlib.ProcessorFormatter,
                    'processor': structlog.processors.JSONRenderer(),
                    'foreign_pre_chain': pre_chain,
                },
            },
            'handlers': {
                'pretty': {
                    'level': 'DEBUG',
                    'class': 'logging.StreamHandler',
                    'formatter': 'colored',
                    'stream': 'ext://sys.stderr',
                },
                'json': {
                    'level': 'DEBUG',
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stderr',
                },
                'null': {
                    'class': 'logging.NullHandler',
                },
            },
            'loggers': {
                '': {
                    'handlers': handlers,
                    'level': 'DEBUG' if logging_options.debug else 'INFO',
                },
            }
    })

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if _test_logging:
        logger = structlog.get_logger()
        logger.debug('Test: debug.')
        logger.info('Test: info.')
        logger.warning('Test: warning.')
        logger.error('Test error.')
        logger.critical('Test: critical.')


def exit_with_error(message: str) -> NoReturn:
    print(f'Error: {message}', file=sys.stderr)
    sys.exit(1)


def check_or_exit(condition: bool, message: str) -> None:
    """Will exit printing `message` if `condition` is False."""
    if not condition:
        exit_with_error(message)


def add_registry_args(parser: ArgumentParser) -> None:
    from swapvm.instructions.opcode_sets import OpcodeSet
    parser.add_argument('--config-yaml', type=str, help='Configuration yaml filepath')
    parser.add_argument('--opcode-set', choices=[opcode_set.value for opcode_set in OpcodeSet],
                        help='Opcode table to use instead of the one in the configuration')


def registry_from_args(args: Namespace) -> OpcodeRegistry:
    from swapvm.conf.get_settings import CONFIG_YAML_ENV_VAR
    from swapvm.registry import build_registry, get_default_registry
    if args.opcode_set:
        return build_registry(args.opcode_set)
    if args.config_yaml:
        os.environ[CONFIG_YAML_ENV_VAR] = args.config_yaml
    return get_default_registry()


def parse_hex(value: str) -> bytes:
    """Parse a hex string, with or without the 0x prefix, exits on invalid input."""
    raw = value[2:] if value.lower().startswith('0x') else value
    try:
        return bytes.fromhex(raw)
    except ValueError:
        exit_with_error(f'invalid hex string: {value!r}')


def parse_json(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        exit_with_error(f'invalid JSON: {e}')
