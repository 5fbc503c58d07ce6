"""Command line interface for passwdqc."""

from __future__ import annotations

import functools
import getpass
import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Callable

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from passwdqc import __version__
from passwdqc.checker import PasswordChecker
from passwdqc.errors import ConfigFileError, PolicyError, WordListError
from passwdqc.models import CheckResult, UserIdentity
from passwdqc.params import DISABLED, Policy, Similar, load_config
from passwdqc.wordlist import load_wordlist

EXIT_SUCCESS = 0
EXIT_USAGE = 1
EXIT_REJECTED = 2
EXIT_FS = 3

console = Console()


def _package_version() -> str:
    try:
        return version("passwdqc")
    except PackageNotFoundError:
        return __version__


def _prompt_password(password_opt: str | None, prompt: str = "Password: ") -> str:
    if password_opt is not None:
        return password_opt
    return getpass.getpass(prompt)


def _enable_logging(verbose: bool) -> None:
    if not verbose:
        return
    package_logger = logging.getLogger("passwdqc")
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=console, show_path=False))
    package_logger.setLevel(logging.DEBUG)


def _handle_action(action: Callable[[], int]) -> int:
    try:
        return action()
    except PolicyError as exc:
        console.print(f"[red]Invalid policy:[/red] {exc}")
        return EXIT_USAGE
    except (ConfigFileError, WordListError) as exc:
        console.print(f"[red]File error:[/red] {exc}")
        return EXIT_FS
    except OSError as exc:  # noqa: BLE001
        console.print(f"[red]Filesystem error:[/red] {exc}")
        return EXIT_FS


def _build_policy(
    config: Path | None,
    min_opt: str | None,
    max_opt: int | None,
    passphrase: int | None,
    match: int | None,
    similar: str | None,
) -> Policy:
    policy = load_config(config) if config is not None else Policy()
    options = []
    if min_opt is not None:
        options.append(f"min={min_opt}")
    if max_opt is not None:
        options.append(f"max={max_opt}")
    if passphrase is not None:
        options.append(f"passphrase={passphrase}")
    if match is not None:
        options.append(f"match={match}")
    if similar is not None:
        options.append(f"similar={similar}")
    return Policy.from_options(options, base=policy)


def _build_checker(options: dict[str, Any]) -> PasswordChecker:
    policy = _build_policy(
        options.pop("config"),
        options.pop("min_opt"),
        options.pop("max_opt"),
        options.pop("passphrase"),
        options.pop("match"),
        options.pop("similar"),
    )
    wordlist = options.pop("wordlist")
    words = load_wordlist(wordlist) if wordlist is not None else None
    return PasswordChecker(policy, words)


def _identity(user: str | None, gecos: str | None, home: str | None) -> UserIdentity | None:
    if user is None and gecos is None and home is None:
        return None
    return UserIdentity(name=user or "", gecos=gecos or "", home_directory=home or "")


def _verdict(result: CheckResult) -> str:
    if result.accepted:
        return "[green]OK[/green]"
    return f"[red]Bad passphrase ({result.message})[/red]"


def policy_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared policy options to a command."""

    @click.option(
        "--config",
        type=click.Path(path_type=Path),
        help="Read passwdqc options from a passwdqc.conf style file.",
    )
    @click.option("--min", "min_opt", help="Minimum lengths N0,N1,N2,N3,N4 ('disabled' allowed).")
    @click.option("--max", "max_opt", type=int, help="Maximum password length (8 truncates).")
    @click.option("--passphrase", type=int, help="Words required for a passphrase (0 disables).")
    @click.option("--match", type=int, help="Common substring length to look for (0 disables).")
    @click.option(
        "--similar",
        type=click.Choice([choice.value for choice in Similar], case_sensitive=False),
        help="Whether the new password may be similar to the old one.",
    )
    @click.option(
        "--wordlist",
        type=click.Path(path_type=Path),
        help="Word list file, one word per line (built-in list by default).",
    )
    @click.option("--verbose/--quiet", "verbose", default=False, help="Log check details.")
    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        _enable_logging(kwargs.pop("verbose"))
        return fn(*args, **kwargs)

    return wrapper


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=False,
)
@click.version_option(version=_package_version(), prog_name="passwdqc")
def cli() -> None:
    """Check password and passphrase strength."""


@cli.command(
    help="Check a single new password against the policy.",
    epilog="Examples:\n  pwqcheck check\n  pwqcheck check --user alice --old-password 'old secret'\n  pwqcheck check --config /etc/passwdqc.conf",
)
@click.option("--password", "password_opt", help="New password (will prompt if omitted).")
@click.option("--old-password", "old_password", help="Old password to compare against.")
@click.option("--user", help="Login name the password must not be based on.")
@click.option("--gecos", help="Full name or comment field of the user.")
@click.option("--home", help="Home directory of the user.")
@policy_options
@click.pass_context
def check(
    ctx: click.Context,
    password_opt: str | None,
    old_password: str | None,
    user: str | None,
    gecos: str | None,
    home: str | None,
    **options: Any,
) -> None:
    def _run() -> int:
        checker = _build_checker(options)
        password = _prompt_password(password_opt)
        result = checker.check(password, old_password, _identity(user, gecos, home))
        console.print(_verdict(result))
        return EXIT_SUCCESS if result.accepted else EXIT_REJECTED

    ctx.exit(_handle_action(_run))


@cli.command(
    help="Check newline-separated passwords from a file or standard input.",
    epilog="Examples:\n  pwqcheck batch candidates.txt\n  cat candidates.txt | pwqcheck batch --match 3",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--user", help="Login name the passwords must not be based on.")
@click.option("--gecos", help="Full name or comment field of the user.")
@click.option("--home", help="Home directory of the user.")
@policy_options
@click.pass_context
def batch(
    ctx: click.Context,
    source: Any,
    user: str | None,
    gecos: str | None,
    home: str | None,
    **options: Any,
) -> None:
    def _run() -> int:
        checker = _build_checker(options)
        identity = _identity(user, gecos, home)
        code = EXIT_SUCCESS
        for lineno, line in enumerate(source, start=1):
            password = line.rstrip("\r\n")
            result = checker.check(password, identity=identity)
            # Verdicts are reported by line number so passwords never echo.
            console.print(f"{lineno}: {_verdict(result)}")
            if not result.accepted:
                code = EXIT_REJECTED
        return code

    ctx.exit(_handle_action(_run))


@cli.command(
    help="Show the effective policy.",
    epilog="Example:\n  pwqcheck policy --config /etc/passwdqc.conf --match 3",
)
@policy_options
@click.pass_context
def policy(ctx: click.Context, **options: Any) -> None:
    def _run() -> int:
        checker = _build_checker(options)
        current = checker.policy
        labels = ("single class", "two classes", "passphrase", "three classes", "four classes")
        table = Table(show_header=False, box=None)
        for label, value in zip(labels, current.min):
            table.add_row(f"Min ({label})", "disabled" if value == DISABLED else str(value))
        table.add_row("Max", str(current.max))
        table.add_row("Passphrase words", str(current.passphrase))
        table.add_row("Match length", str(current.match) if current.match else "disabled")
        table.add_row("Similar", current.similar.value)
        table.add_row("Word list", f"{len(checker.words)} word(s)")

        console.print("[bold]passwdqc policy[/bold]")
        console.print(table)
        console.print(" ".join(current.describe()))
        return EXIT_SUCCESS

    ctx.exit(_handle_action(_run))


def main(argv: list[str] | None = None) -> int:
    try:
        return cli.main(args=argv, prog_name="pwqcheck", standalone_mode=False)
    except SystemExit as exc:  # noqa: TRY003
        code = exc.code if isinstance(exc.code, int) else EXIT_USAGE
        return code
    except click.ClickException as exc:
        exc.show()
        return EXIT_USAGE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
