"""
Main CLI module with argument parsing and command execution.

Commands:
- cache: warm the view paths cache and show what was cached
- clear: remove the cached view paths
- list:  show configuration, cached paths and configured paths
"""
import argparse
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from jinja2 import Environment

from view_paths._package import __version__
from view_paths.application.services.view_paths_service import ViewPathsService
from view_paths.bootstrap import ViewPathsProvider
from view_paths.cli.formatters import (
    format_cache_result,
    format_clear_result,
    format_list_result,
    format_output,
)
from view_paths.config.manager import ConfigurationManager
from view_paths.domain.base.exceptions import ConfigurationError
from view_paths.infrastructure.logging.logger import get_logger, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "view-paths",
        description="View paths - template directory registration and cache administration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s cache                        # Warm the view paths cache
  %(prog)s clear                        # Clear the view paths cache
  %(prog)s list --format json           # Show configuration and paths as JSON
  %(prog)s --config app.yml list        # Use a specific configuration file
        """,
    )

    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument(
        "--format", choices=["table", "json", "yaml"], default="table", help="Output format"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser("cache", help="Cache view paths for improved performance")
    subparsers.add_parser("clear", help="Clear the view paths cache")
    subparsers.add_parser("list", help="List all configured and cached view paths")

    return parser.parse_args(argv)


def handle_cache(service: ViewPathsService, output_format: str) -> str:
    service.warm_cache()
    cache_info = service.get_cache_info()
    if output_format == "table":
        return format_cache_result(cache_info)
    return format_output(cache_info, output_format)


def handle_clear(service: ViewPathsService, output_format: str) -> str:
    cleared = service.clear_cache()
    if output_format == "table":
        return format_clear_result(cleared)
    return format_output({"cleared": cleared}, output_format)


def handle_list(service: ViewPathsService, output_format: str) -> str:
    cache_info = service.get_cache_info()
    configured: Dict[str, Any] = {
        "paths": list(service.config.paths),
        "namespaced_paths": service.get_namespaced_paths(),
    }
    if output_format == "table":
        return format_list_result(cache_info, configured)
    return format_output({**cache_info, "configured": configured}, output_format)


COMMAND_HANDLERS: Dict[str, Callable[[ViewPathsService, str], str]] = {
    "cache": handle_cache,
    "clear": handle_clear,
    "list": handle_list,
}


def create_service(config_path: Optional[str] = None) -> ViewPathsService:
    """Build the service for command line use; paths are registered with a scratch environment."""
    config = ConfigurationManager(config_path).config
    return ViewPathsProvider.for_environment(Environment(), config).service


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        setup_logging(args.log_level)
        logger = get_logger(__name__)

        if not args.command:
            print("Error: No command specified. Use --help for usage information.")
            return 1

        try:
            service = create_service(args.config)
        except ConfigurationError as e:
            logger.error(f"Failed to load configuration: {e}")
            print(f"Error: {e}")
            return 1

        try:
            print(COMMAND_HANDLERS[args.command](service, args.format))
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            print(f"Unexpected error: {e}")
            return 1

        return 0

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
