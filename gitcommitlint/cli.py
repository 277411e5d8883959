#!/usr/bin/env python3
import asyncio
import json
import os
from pathlib import Path
from typing import List, Optional

import click
import pyperclip
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError
from rich.console import Console

from . import __version__
from .config import DEFAULT_CONFIG_FILENAME, Config, ConfigError
from .history import edit_message_path, get_comment_char, open_repo, read_commit_messages, read_message_file
from .linter import CommitLinter
from .observers import ConsoleLogObserver, FileLogObserver
from .parsing import ParserPresetError
from .preset import UnknownPresetError
from .ruleset import RuleConfigError

console = Console()


def run_async(coro):
    """Run an async coroutine, handling both test and production environments."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        # No event loop running, use asyncio.run()
        return asyncio.run(coro)

    # Called from inside a running loop (e.g. an async test)
    import nest_asyncio

    nest_asyncio.apply(loop)
    return loop.run_until_complete(coro)


def _open_repo_or_none(path: Path):
    try:
        return open_repo(path)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return None


def _collect_messages(
    repo_path: Path,
    message: Optional[str],
    edit: Optional[str],
    from_ref: Optional[str],
    to_ref: str,
    last: bool,
):
    """Gather the messages to lint and the comment character to strip.

    Precedence: --message, then --edit, then a git range, then stdin.
    """
    if message is not None:
        return [message], None

    if edit is not None:
        repo = _open_repo_or_none(repo_path)
        try:
            message_path = edit_message_path(repo, edit)
        except ValueError as e:
            raise click.UsageError(str(e))
        if not message_path.is_absolute():
            message_path = repo_path / message_path
        if not message_path.exists():
            raise click.UsageError(f"Commit message file not found: {message_path}")
        return [read_message_file(message_path)], get_comment_char(repo)

    if from_ref or last:
        repo = _open_repo_or_none(repo_path)
        if repo is None:
            raise click.UsageError(f"Not a git repository: {repo_path}")
        return read_commit_messages(repo, from_ref=from_ref, to_ref=to_ref, last=last), None

    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        raise click.UsageError(
            "No commit message given. Pass --message, --edit, --from/--last or pipe a message on stdin"
        )
    return [stdin.read()], None


def _print_config(config: Config, repo_path: Path) -> None:
    config_path = repo_path / DEFAULT_CONFIG_FILENAME
    source = "config" if config_path.exists() else "default"

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<24} {'Value':<30} {'Source':<10}")
    console.print("-" * 64)
    for name in ["preset", "parser_preset", "locale", "default_ignores", "help_url", "always_log", "log_file"]:
        value = getattr(config, name)
        console.print(f"{name:<24} {str(value if value is not None else 'None'):<30} {source:<10}")

    rule_set = config.build_rule_set()
    console.print(
        f"\n[bold]Rules[/bold] [dim](parser preset: {rule_set.parser_preset}, locale: {rule_set.locale})[/dim]"
    )
    for name, rule_config in rule_set.to_mapping().items():
        console.print(f"{name:<24} {json.dumps(rule_config, ensure_ascii=False)}", markup=False)

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


@click.command()
@click.option(
    "--config-dir",
    is_flag=True,
    help="Display the config file location and copy it to clipboard",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings and rules"
)
@click.option(
    "-g",
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=f"Config file to use instead of {DEFAULT_CONFIG_FILENAME} in the repository root",
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option("-m", "--message", help="Commit message to lint")
@click.option(
    "-e",
    "--edit",
    is_flag=False,
    flag_value="",
    default=None,
    help="Lint a commit message file (defaults to .git/COMMIT_EDITMSG)",
)
@click.option("--from", "from_ref", help="Lower end of the commit range to lint (exclusive)")
@click.option("--to", "to_ref", default="HEAD", show_default=True, help="Upper end of the commit range to lint")
@click.option("--last", is_flag=True, help="Lint the last commit")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option("--locale", help="Locale for violation messages (overrides config setting)")
@click.option("--strict", is_flag=True, help="Fail on warnings as well as errors")
@click.option("-q", "--quiet", is_flag=True, help="Print nothing, only set the exit code")
@click.option("-V", "--verbose", is_flag=True, help="Also print reports for valid messages")
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log lint results (overrides config setting)",
)
@click.version_option(__version__, prog_name="gitcommitlint")
def main(
    config_dir: bool,
    config_list: bool,
    config_file: Optional[Path],
    path: Path,
    message: Optional[str],
    edit: Optional[str],
    from_ref: Optional[str],
    to_ref: str,
    last: bool,
    output_format: str,
    locale: Optional[str],
    strict: bool,
    quiet: bool,
    verbose: bool,
    log_file: Optional[Path],
):
    """
    Lint commit messages against conventional commit rules.

    Messages are read from --message, a commit message file (--edit, suitable
    for a commit-msg hook), a range of git history (--from/--to, --last) or
    stdin.

    Configuration can be set in .gitcommitlint.toml in the repository root.
    Command line options override configuration file settings.

    Exits with status 1 when a message has errors (or warnings, with --strict).
    """
    exit_code = 0
    try:
        repo_path = path.absolute()
        config = Config.load_file(config_file) if config_file else Config.load(repo_path)

        if config_list:
            _print_config(config, repo_path)
            return

        if config_dir:
            config_path = repo_path / DEFAULT_CONFIG_FILENAME
            config_path_str = str(config_path)

            # Create default config file if it doesn't exist
            if not config_path.exists():
                Config().save(repo_path)
                console.print("[yellow]Created new config file with default values[/yellow]")

            pyperclip.copy(config_path_str)
            console.print(f"[green]Config file location:[/green] {config_path_str}")
            console.print("[green]Path copied to clipboard![/green]")
            return

        # Command line options override config
        if locale is not None:
            config.locale = locale
        if log_file is not None:
            config.log_file = str(log_file)

        rule_set = config.build_rule_set()
        messages, comment_char = _collect_messages(repo_path, message, edit, from_ref, to_ref, last)

        linter = CommitLinter(
            rule_set,
            default_ignores=config.default_ignores,
            ignores=config.ignores,
            comment_char=comment_char,
        )

        if output_format == "text":
            linter.add_observer(
                ConsoleLogObserver(console, verbose=verbose, quiet=quiet, help_url=config.help_url)
            )

        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            linter.add_observer(FileLogObserver(str(log_file_path)))

        reports = run_async(linter.lint_many(messages))

        if output_format == "json" and not quiet:
            payload: List[dict] = [report.model_dump(mode="json") for report in reports]
            click.echo(json.dumps(payload, ensure_ascii=False, indent=2))

        failed = any(not report.valid for report in reports)
        if strict:
            failed = failed or any(report.warnings for report in reports)
        exit_code = 1 if failed else 0
    except (ConfigError, RuleConfigError, ParserPresetError, UnknownPresetError) as e:
        raise click.UsageError(str(e))
    except (GitCommandError, InvalidGitRepositoryError, NoSuchPathError) as e:
        raise click.ClickException(f"Git error: {e}")
    except click.ClickException:
        raise
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        exit_code = 130
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()

    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
