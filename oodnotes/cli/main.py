"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing to the example service
- Output formatting and error reporting
"""
import argparse
import os
import sys
import traceback
from typing import Any, Dict, List, Optional

from oodnotes._package import __version__
from oodnotes.cli.formatters import format_output
from oodnotes.config.schemas import OutputFormat
from oodnotes.domain.core.exceptions import DomainException
from oodnotes.infrastructure.logging.logger import get_logger
from oodnotes.infrastructure.registry.example_registry import ExampleCategory

FORMAT_CHOICES = [f.value for f in OutputFormat]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "oodnotes",
        description="Object-oriented design notes - runnable relationship, SOLID and pattern examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                          # List all examples
  %(prog)s list --category patterns      # List design patterns only
  %(prog)s show memento                  # Describe one example
  %(prog)s --format table run strategy   # Run an example, trace as a table
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMAT_CHOICES,
                        help='Output format (default: from configuration)')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List examples')
    list_parser.add_argument('--category', choices=[c.value for c in ExampleCategory],
                             help='Filter by category')

    show_parser = subparsers.add_parser('show', help='Describe an example')
    show_parser.add_argument('name', help='Example name')

    run_parser = subparsers.add_parser('run', help='Run an example and print its trace')
    run_parser.add_argument('name', help='Example name')

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, app: Any) -> Dict[str, Any]:
    """Route a parsed command to the example service."""
    service = app.example_service
    if args.command == 'list':
        return service.list_examples(args.category)
    elif args.command == 'show':
        return service.describe_example(args.name)
    elif args.command == 'run':
        return service.run_example(args.name)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        if not args.command:
            print("Error: No command specified. Use --help for usage information.")
            sys.exit(1)

        # Initialize application
        try:
            from oodnotes.bootstrap import create_application
            app = create_application(args.config, log_level=args.log_level)
        except DomainException as e:
            logger.error(f"Failed to initialize application: {e}")
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)

        # Execute command
        try:
            result = execute_command(args, app)

            output_format = args.format or app.config.output.format.value
            formatted_output = format_output(result, output_format)

            if args.output:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(formatted_output + "\n")
                if not args.quiet:
                    print(f"Output written to {args.output}")
            else:
                print(formatted_output)

        except DomainException as e:
            logger.error(f"Domain error: {e}")
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
