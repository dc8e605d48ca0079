import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from tqdm import tqdm

from codevault import prompts
from codevault.config import VaultConfig
from codevault.errors import OperationCancelled, VaultError
from codevault.logging_setup import configure_logging
from codevault.service import EditUpdate, VaultService, parse_id_list
from codevault.snippet import Snippet, SnippetStore
from codevault.utils import Highlighter


logger = logging.getLogger("codevault")

HEADER = "\x1b[38;5;201;1m"
SUCCESS = "\x1b[1;32m"
WARN = "\x1b[1;93m"
ERROR = "\x1b[1;31m"
BULLET = "\x1b[1;36m»\x1b[0m"
RESET = "\x1b[0m"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codevault",
        description="Capture, browse, edit and export personal code snippets",
    )
    parser.add_argument(
        "--data-file",
        dest="data_file",
        default=None,
        help="Snippet collection file (defaults to CODEVAULT_DATA_FILE or data/codevault.json)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    capture = subparsers.add_parser("capture", help="Add a new code snippet to your collection")
    capture.add_argument("--tag", "-t", required=True, help="Tag used to categorize the snippet")
    capture.add_argument("--description", "-d", default=None, help="Describe the snippet")
    capture.add_argument(
        "--language", "-l", default=None, help="Programming language for syntax highlighting"
    )

    copy = subparsers.add_parser("copy", help="Show the code of a snippet by ID")
    copy.add_argument("--id", "-i", type=int, default=None, help="Snippet ID")

    delete = subparsers.add_parser("delete", help="Remove snippets by ID (comma-separated)")
    delete.add_argument("--id", "-i", default=None, help="Snippet IDs, e.g. 3,7")
    delete.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")

    edit = subparsers.add_parser("edit", help="Modify an existing snippet")
    edit.add_argument("--id", "-i", type=int, default=None, help="ID of the snippet to edit")
    edit.add_argument("--tag", "-t", default=None, help="Tag of the snippet to edit")

    export = subparsers.add_parser(
        "export", help="Export snippets to language-specific files by ID, tag or language"
    )
    export.add_argument("--id", "-i", type=int, default=None, help="Export one snippet by ID")
    export.add_argument("--tag", "-t", default=None, help="Tags to export (comma-separated)")
    export.add_argument(
        "--language", "-l", default=None, help="Languages to export (comma-separated)"
    )
    export.add_argument("--path", "-p", default=None, help="Destination directory")
    export.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")

    subparsers.add_parser("languages", help="List languages supported for syntax highlighting")

    view = subparsers.add_parser("view", help="Display snippets, optionally filtered")
    view.add_argument("--id", "-i", type=int, default=None, help="Snippet ID")
    view.add_argument("--tag", "-t", default=None, help="Filter by tag (comma-separated)")
    view.add_argument("--language", "-l", default=None, help="Filter by language (comma-separated)")
    view.add_argument("--keyword", "-k", default=None, help="Filter by keyword (comma-separated)")
    view.add_argument("--summary", "-s", action="store_true", help="Hide code bodies")

    return parser


def _echo(message: str = "") -> None:
    tqdm.write(message)


def run_capture(service: VaultService, args: argparse.Namespace) -> None:
    _echo(f"\n{HEADER}Capture snippet:{RESET}\n")
    _echo(f"\x1b[1;36m Enter your code snippet (press 'Return', then 'Ctrl+D' to finish):{RESET}")
    code = prompts.read_block()
    snippet = service.capture(
        args.tag, code, description=args.description, language=args.language
    )
    _echo(f"\n{SUCCESS}Snippet {snippet.id} captured successfully!{RESET}\n")


def run_copy(service: VaultService, args: argparse.Namespace) -> None:
    snippet = service.copy(args.id)
    _echo(f"\n{HEADER}Code:{RESET}\n")
    code = snippet.code
    if snippet.language and service.highlighter is not None:
        code = service.highlighter.highlight(code, snippet.language)
    _echo(code)


def run_delete(service: VaultService, args: argparse.Namespace) -> None:
    ids = parse_id_list(args.id)
    _echo(f"\n{HEADER}Delete snippet:{RESET}\n")
    confirm = prompts.assume_yes if args.yes else prompts.confirm
    deleted = service.delete(ids, confirm=confirm)
    _echo(f"\n{SUCCESS}{deleted} deleted successfully!{RESET}")


def _updates_prompter(service: VaultService) -> Callable[[Snippet], EditUpdate]:
    def prompt(snippet: Snippet) -> EditUpdate:
        _echo(f"\n{HEADER}Edit snippet:{RESET}\n")
        for line in service.renderer.render(snippet, "full"):
            _echo(line)
        return _read_updates()

    return prompt


def _read_updates() -> EditUpdate:
    tag = prompts.ask("Enter new tag")
    description = prompts.ask("Enter new description")
    language = prompts.ask("Enter new language")
    _echo(
        f"\x1b[1;36m Enter the new code (press 'Return', then 'Ctrl+D' to finish; "
        f"leave empty to keep current):{RESET}"
    )
    code = prompts.read_block()
    return EditUpdate(
        tag=tag or None,
        description=description or None,
        language=language or None,
        code=code or None,
    )


def run_edit(service: VaultService, args: argparse.Namespace) -> None:
    edited = service.edit(
        id=args.id,
        tag=args.tag,
        choose_id=prompts.choose_id,
        prompt_updates=_updates_prompter(service),
    )
    _echo(f"\n{SUCCESS}Changes have been applied; the snippet is now ID {edited.id}.{RESET}")


def run_export(service: VaultService, args: argparse.Namespace, config: VaultConfig) -> None:
    directory = Path(args.path) if args.path else config.export_dir
    if not args.path:
        _echo(f"\x1b[1;36mNo export path specified. Exporting to '{directory}'.{RESET}")
    _echo(f"\n{HEADER}Export Snippets:{RESET}\n")
    confirm = prompts.assume_yes if args.yes else prompts.confirm
    report = service.export(
        directory=directory,
        id=args.id,
        tag=args.tag,
        language=args.language,
        confirm=confirm,
    )
    for path in report.skipped:
        _echo(f"{WARN}The file has already been exported and is located at '{path}'.{RESET}")
    for path, reason in report.failed:
        _echo(f"{ERROR}error:{RESET} writing {path}: {reason}")
    for path in report.written:
        _echo(f"{SUCCESS}Successfully exported snippet to file '{path}'.{RESET}")


def run_languages(service: VaultService, _args: argparse.Namespace) -> None:
    _echo(f"\n{HEADER}Supported Languages:{RESET}\n")
    for language in service.supported_languages():
        _echo(f"{BULLET} \x1b[1;33m{language}{RESET}")


def run_view(service: VaultService, args: argparse.Namespace) -> None:
    _echo(f"\n{HEADER}Snippets Collection:{RESET}\n")
    snippets = service.view(id=args.id, tag=args.tag, language=args.language, keyword=args.keyword)
    if not snippets:
        _echo(f"{WARN}No snippets match the given filters.{RESET}")
        return
    for line in service.render(snippets, summary=args.summary):
        _echo(line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = VaultConfig.from_env()
    if args.data_file:
        config.data_file = Path(args.data_file)
    configure_logging("DEBUG" if args.verbose else config.log_level)

    highlighter = Highlighter(config.highlight_style)
    service = VaultService(SnippetStore(config.data_file), highlighter)

    handlers = {
        "capture": run_capture,
        "copy": run_copy,
        "delete": run_delete,
        "edit": run_edit,
        "languages": run_languages,
        "view": run_view,
    }

    try:
        if args.command == "export":
            run_export(service, args, config)
        else:
            handlers[args.command](service, args)
    except KeyboardInterrupt:
        print("\n⚠️ Operation interrupted", file=sys.stderr)
        return 1
    except OperationCancelled as exc:
        _echo(f"\n\x1b[91m{exc.message[:1].upper()}{exc.message[1:]}{RESET}")
        return 0
    except VaultError as exc:
        print(f"{ERROR}error:{RESET} {exc.message}", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Fatal error while running %s", args.command)
        print("\n❌ Fatal error occurred. See log for details.", file=sys.stderr)
        return 1

    return 0


def _entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    _entrypoint()
