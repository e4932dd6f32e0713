"""
Main CLI module with argument parsing and command execution.

This module provides the ``patterns`` command:
- ``patterns list`` lists the registered demonstrations
- ``patterns run <name>`` runs one demonstration, ``run all`` runs every one
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

from src._package import DESCRIPTION, PACKAGE_NAME_SHORT
from src._version import __version__
from src.application.demos import list_demos, run_all, run_demo
from src.cli.formatters import format_output
from src.config.manager import get_config_manager
from src.infrastructure.error.error_middleware import with_error_handling
from src.infrastructure.error.exception_handler import ErrorResponse
from src.infrastructure.logging.logger import get_logger, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME_SHORT,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                      # List demonstrations
  %(prog)s run singleton             # Run one demonstration
  %(prog)s run all --format json     # Run every demonstration as JSON
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=['text', 'json'], help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.add_parser('list', help='List demonstrations')

    run_parser = subparsers.add_parser('run', help='Run a demonstration')
    run_parser.add_argument('name', help="Demonstration name, or 'all'")

    return parser.parse_args(argv)


@with_error_handling()
def execute_command(args: argparse.Namespace, config_manager) -> Dict[str, Any]:
    """Execute the parsed command and return a serializable result."""
    demo_config = config_manager.app_config.demo

    if args.command == 'list':
        return {"demos": [definition.model_dump() for definition in list_demos()]}

    if args.name.strip().lower() == 'all':
        results = run_all(demo_config)
    else:
        results = [run_demo(args.name, demo_config)]
    return {"results": [result.model_dump() for result in results]}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = parse_args(argv)

    if not args.command:
        print("Error: No command specified. Use --help for usage information.")
        return 1

    try:
        config_manager = get_config_manager(args.config)
        app_config = config_manager.app_config
    except Exception as e:
        print(f"Error: Failed to load configuration: {e}")
        return 1

    logging_config = app_config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    setup_logging(logging_config)
    logger = get_logger(__name__)

    output_format = args.format or app_config.demo.output_format
    result = execute_command(args, config_manager)

    if isinstance(result, ErrorResponse):
        logger.error(f"Command failed: {result.message}")
        print(format_output(result.to_dict(), output_format))
        return 1

    print(format_output(result, output_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
