"""Command-line interface for placeholder substitution and shell quoting."""

import sys
import signal
import argparse

from pathlib import Path
from rich.console import Console
from rich.markup import escape

from photo_vars._version import __version__
from photo_vars.core.exceptions import MetadataError
from photo_vars.core.logging_setup import configure_logging
from photo_vars.core.metadata import ImageMetadata, load_metadata
from photo_vars.core.system_context import SystemContext
from photo_vars.core.text_utils import strip_accents, escape_xml_characters, urlencode
from photo_vars.shell.sanitizer import is_not_sanitized, sanitize, quote_command
from photo_vars.substitution.placeholders import build_substitution_list
from photo_vars.substitution.template_engine import substitute_list, preview_substitution
from photo_vars.ui import display_placeholder_table, display_substitution_preview


console = Console()


def setup_signal_handlers():
    """Setup graceful handling of Ctrl+C interruptions."""
    def signal_handler(sig, frame):
        console.print("\n[yellow]Operation interrupted by user[/yellow]")
        sys.exit(130)  # Standard exit code for Ctrl+C

    signal.signal(signal.SIGINT, signal_handler)


epilog_for_argparse = """
Template Syntax:
    Placeholders:       $(FILE.NAME)  $(EXIF.ISO)  $(FOLDER.HOME)  $(SEQUENCE)
    Legacy names:       $(HOME)  $(PICTURES_FOLDER)  $(DESKTOP)  (underscores = dots)

Modifiers (one per placeholder):
    $(NAME^^)  $(NAME^)        uppercase all / first letter
    $(NAME,,)  $(NAME,)        lowercase all / first letter
    $(NAME:2)  $(NAME:0:3)     characters from offset / offset to end position
    $(NAME:-3)                 last 3 characters
    $(NAME-text)               text if NAME is empty
    $(NAME-$(OTHER))           OTHER's value if NAME is empty
    $(NAME+text)               text if NAME is not empty
    $(NAME#pat)  $(NAME%pat)   strip pat from start / end
    $(NAME//pat/rep)           replace every pat
    $(NAME/pat/rep)            replace first pat
    $(NAME/#pat/rep)           replace pat at start
    $(NAME/%pat/rep)           replace pat at end

Examples:
    photo-vars --template "$(FILE.FOLDER)/export/$(FILE.NAME%.CR2)_$(SEQUENCE)" --metadata img.json
    photo-vars --template "$(TITLE-$(FILE.NAME))" --metadata img.json --explain
    photo-vars --sanitize "it's a file.jpg" "/photos/my album"
    photo-vars --list-placeholders --metadata img.json
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photo-vars",
        description="Photo Vars - Expand export filename templates and quote shell arguments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog_for_argparse
    )

    # Version
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}',
        help='Show program version and exit')

    # Operations
    operations = parser.add_argument_group('operations')
    operations.add_argument('--template', type=str, metavar='TEMPLATE',
        help='Expand the placeholders in TEMPLATE and print the result')
    operations.add_argument('--sanitize', type=str, metavar='ARG', nargs='+',
        help='Quote each ARG for the shell and print the resulting command line')
    operations.add_argument('--list-placeholders', action='store_true',
        help='List all placeholders (with values when --metadata is given)')

    # Substitution inputs
    inputs = parser.add_argument_group('substitution inputs')
    inputs.add_argument('--metadata', type=Path, metavar='FILE',
        help='JSON file with the image metadata record')
    inputs.add_argument('--sequence', type=int, default=1, metavar='N',
        help='Sequence number of the image (default: 1)')
    inputs.add_argument('--username', type=str,
        help='User name (default: from the environment)')
    inputs.add_argument('--pictures-dir', type=str, metavar='DIR',
        help='Pictures folder (default: derived from the home folder)')
    inputs.add_argument('--home-dir', type=str, metavar='DIR',
        help='Home folder (default: from the environment)')
    inputs.add_argument('--desktop-dir', type=str, metavar='DIR',
        help='Desktop folder (default: derived from the home folder)')

    # Output
    output = parser.add_argument_group('output options')
    output.add_argument('--explain', action='store_true',
        help='Show how each token of --template was resolved')
    output.add_argument('--strip-accents', action='store_true',
        help='Replace accented characters in the result with plain ASCII')
    output.add_argument('--escape-xml', action='store_true',
        help='Escape XML special characters in the result')
    output.add_argument('--urlencode', action='store_true',
        help='URL-encode the result')
    output.add_argument('--sanitize-output', action='store_true',
        help='Quote the result as a single shell argument')
    output.add_argument('--check', action='store_true',
        help='With --sanitize: report whether each ARG is already quoted instead')

    parser.add_argument('--log-level', type=str, default=None, metavar='LEVEL',
        help='Diagnostic level: DEBUG, INFO, WARNING, ERROR (default: WARNING)')

    return parser


def post_process(result: str, args: argparse.Namespace) -> str:
    """Apply the output options to a substituted string, in a fixed order."""
    if args.strip_accents:
        result = strip_accents(result)
    if args.escape_xml:
        result = escape_xml_characters(result)
    if args.urlencode:
        result = urlencode(result)
    if args.sanitize_output:
        result = sanitize(result)
    return result


def load_image(args: argparse.Namespace) -> ImageMetadata:
    if args.metadata is None:
        return ImageMetadata()
    return load_metadata(args.metadata)


def build_registry(args: argparse.Namespace, image: ImageMetadata):
    context = SystemContext.from_environment(
        username=args.username,
        pictures_dir=args.pictures_dir,
        home_dir=args.home_dir,
        desktop_dir=args.desktop_dir,
    )
    return build_substitution_list(image, args.sequence, context=context)


def handle_sanitize(args: argparse.Namespace):
    if args.check:
        for argument in args.sanitize:
            if is_not_sanitized(argument):
                console.print(f"[yellow]not sanitized[/yellow]  {escape(argument)}")
            else:
                console.print(f"[green]sanitized[/green]      {escape(argument)}")
        return

    console.print(quote_command(args.sanitize), markup=False, highlight=False, emoji=False, soft_wrap=True)


def handle_template(args: argparse.Namespace, registry):
    if args.explain:
        display_substitution_preview(preview_substitution(args.template, registry))
        return

    result = post_process(substitute_list(args.template, registry), args)
    console.print(result, markup=False, highlight=False, emoji=False, soft_wrap=True)


def main(argv=None):
    """
    Main entry point for photo-vars.

    Like the rest of the tool, options are long-form only.
    """
    setup_signal_handlers()

    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if not (args.template is not None or args.sanitize or args.list_placeholders):
        console.print("[red]Error: Nothing to do - use --template, --sanitize or --list-placeholders[/red]")
        parser.print_usage()
        sys.exit(1)

    if args.check and not args.sanitize:
        console.print("[red]Error: --check can only be used with --sanitize[/red]")
        sys.exit(1)

    if args.explain and args.template is None:
        console.print("[red]Error: --explain can only be used with --template[/red]")
        sys.exit(1)

    if args.sanitize:
        handle_sanitize(args)

    if args.template is None and not args.list_placeholders:
        return

    try:
        image = load_image(args)
    except MetadataError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    registry = build_registry(args, image)

    if args.list_placeholders:
        display_placeholder_table(registry if args.metadata is not None else None)

    if args.template is not None:
        handle_template(args, registry)


if __name__ == "__main__":
    main()
