"""
命令行入口
"""
import argparse
import platform
import sys
from typing import List, Optional

from . import __version__, __author__
from .checker import SSLCheckRunner
from .models import OutputMode
from .services.config_validator import ConfigValidator
from .services.logger import LoggerService
from .services.output_formatter import OutputFormatter

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

HELP_TEXT = (
    "sslcheck <domain>         prints domain and remainder of days until cert expires\n"
    "-s --short <domain>       prints only the days\n"
    "-j --json <domain>        prints output as JSON\n"
    "-p --port <port>          use custom port instead of 443\n"
    "-h --help                 prints this menu\n"
    "-v --version              prints version\n"
)

_PLATFORMS = {
    'linux': 'Linux',
    'darwin': 'macOS',
    'freebsd': 'FreeBSD',
    'windows': 'Windows',
}

_ARCHES = {
    'x86_64': 'x86_64',
    'amd64': 'x86_64',
    'i386': 'i386',
    'i686': 'i386',
    'x86': 'i386',
    'aarch64': 'arm64',
    'arm64': 'arm64',
    'ppc64': 'ppc64',
    'ppc64le': 'ppc64',
    'ppc': 'ppc',
    'powerpc': 'ppc',
}


def get_platform() -> str:
    return _PLATFORMS.get(platform.system().lower(), 'Unknown')


def get_arch() -> str:
    machine = platform.machine().lower()
    if machine in _ARCHES:
        return _ARCHES[machine]
    if machine.startswith('arm'):
        return 'arm'
    if machine.startswith('mips'):
        return 'mips'
    return 'unknown'


def version_text() -> str:
    return f"SSLCHECK {__version__} ({get_platform()}, {get_arch()})\n{__author__}\n"


def help_text() -> str:
    return f"{version_text()}\n{HELP_TEXT}"


class _ArgumentParser(argparse.ArgumentParser):
    """参数错误时打印帮助并返回失败"""

    def error(self, message):
        sys.stderr.write(f"sslcheck: {message}\n")
        sys.stdout.write(help_text())
        self.exit(EXIT_FAILURE)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="sslcheck", add_help=False)
    parser.add_argument("domain", nargs="?")
    parser.add_argument("-s", "--short", action="store_true", dest="short_output")
    parser.add_argument("-j", "--json", action="store_true", dest="json_output")
    parser.add_argument("-p", "--port")
    parser.add_argument("-h", "--help", action="store_true", dest="show_help")
    parser.add_argument("-v", "--version", action="store_true", dest="show_version")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    命令行主函数

    Args:
        argv: 命令行参数，默认sys.argv[1:]

    Returns:
        int: 退出码
    """
    args = build_parser().parse_args(argv)

    if args.show_help:
        sys.stdout.write(help_text())
        return EXIT_SUCCESS

    if args.show_version:
        sys.stdout.write(version_text())
        return EXIT_SUCCESS

    if args.domain is None:
        sys.stdout.write(help_text())
        return EXIT_FAILURE

    validator = ConfigValidator()
    config = validator.build_config(
        args.domain,
        port=args.port,
        short_output=args.short_output,
        json_output=args.json_output
    )

    logger_service = LoggerService(log_level=config.log_level)
    validation = validator.validate_config(config)
    if not validation['is_valid']:
        for error in validation['errors']:
            logger_service.logger.error(error)
        sys.stdout.write(help_text())
        return EXIT_FAILURE

    runner = SSLCheckRunner(logger_service=logger_service)
    outcome = runner.check(config.target)

    line = OutputFormatter().render(outcome.result, config.output_mode)
    if line is not None:
        sys.stdout.write(line)

    if outcome.is_success:
        return EXIT_SUCCESS

    if config.output_mode != OutputMode.JSON:
        sys.stderr.write(f"{runner.describe_error(outcome)}\n")
    return EXIT_FAILURE
