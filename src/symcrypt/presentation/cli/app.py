"""Symcrypt CLI application using Typer.

Thin wiring around the library: generate a key, and encrypt or decrypt a
value for an owner. The key comes from ``--key`` or from SYMCRYPT_KEY.
"""

import logging
import sys
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from symcrypt.domain.exceptions import SymcryptError
from symcrypt.domain.services import Client
from symcrypt.domain.value_objects import Ciphertext, HexKey, Owner, Plaintext
from symcrypt.infrastructure.xchacha_client import generate_random_key, new_client
from symcrypt_config import Settings, get_settings

app = typer.Typer(
    name="symcrypt",
    help="symcrypt - owner-bound symmetric encryption",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


# Create key subcommand group
key_app = typer.Typer(
    name="key",
    help="Key generation utilities",
    no_args_is_help=True,
)
app.add_typer(key_app)

KEY_OPTION_HELP = "Hex-encoded 32-byte key (defaults to SYMCRYPT_KEY)"
OWNER_OPTION_HELP = "Owner the value is bound to"


def _configure_logging(settings: Settings) -> None:
    """Configure logging from settings.

    Logs go to stderr so stdout only ever carries command output.
    """
    log_level = getattr(logging, settings.log_level)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("symcrypt").setLevel(log_level)


@app.callback()
def main() -> None:
    """Encrypt secrets for an owner and decrypt them only for that owner."""
    try:
        settings = get_settings()
    except ValidationError as e:
        fields = ", ".join(
            "SYMCRYPT_" + "_".join(str(part) for part in err["loc"]).upper()
            for err in e.errors()
        )
        err_console.print(f"[red]Invalid configuration:[/red] {escape(fields)}")
        raise typer.Exit(code=2) from None
    _configure_logging(settings)


def _build_client(key: str | None) -> Client:
    hex_key = HexKey(key.strip()) if key else get_settings().hex_key()
    if hex_key is None:
        err_console.print(
            "[red]No key configured.[/red] Pass --key or set SYMCRYPT_KEY "
            "(generate one with [bold]symcrypt key generate[/bold])."
        )
        raise typer.Exit(code=2)
    try:
        return new_client(hex_key)
    except SymcryptError as e:
        _fail(e)


def _fail(error: SymcryptError) -> NoReturn:
    logger.warning("Operation rejected: %s", error.code.value)
    err_console.print(f"[red]Error ({error.code.value}):[/red] {escape(error.message)}")
    raise typer.Exit(code=1)


@key_app.command("generate")
def generate_key() -> None:
    """Generate a random key for SYMCRYPT_KEY.

    Copy the output to your environment or .env file and keep it secret.
    """
    try:
        hex_key = generate_random_key()
    except SymcryptError as e:
        _fail(e)
    console.print(f"[cyan]SYMCRYPT_KEY[/cyan]={hex_key.value}", soft_wrap=True)
    err_console.print(
        "[yellow]Keep this key secret and never commit it "
        "to version control![/yellow]"
    )


@app.command("encrypt")
def encrypt_command(
    plaintext: str | None = typer.Argument(
        None,
        help="Value to encrypt (read from stdin when omitted)",
        show_default=False,
    ),
    owner: str = typer.Option(..., "--owner", "-o", help=OWNER_OPTION_HELP),
    key: str | None = typer.Option(None, "--key", "-k", help=KEY_OPTION_HELP),
) -> None:
    """Encrypt a value for an owner and print the hex ciphertext."""
    if plaintext is None:
        plaintext = typer.get_text_stream("stdin").read().removesuffix("\n")

    client = _build_client(key)
    try:
        ciphertext = client.encrypt(Plaintext(plaintext), Owner(owner))
    except SymcryptError as e:
        _fail(e)

    logger.debug(
        "Encrypted %d characters for owner %r",
        len(plaintext),
        owner,
    )
    typer.echo(ciphertext.value)


@app.command("decrypt")
def decrypt_command(
    ciphertext: str = typer.Argument(..., help="Hex ciphertext to decrypt"),
    owner: str = typer.Option(..., "--owner", "-o", help=OWNER_OPTION_HELP),
    key: str | None = typer.Option(None, "--key", "-k", help=KEY_OPTION_HELP),
) -> None:
    """Decrypt a ciphertext for the owner it was encrypted for."""
    client = _build_client(key)
    try:
        plaintext = client.decrypt(Ciphertext(ciphertext.strip()), Owner(owner))
    except SymcryptError as e:
        _fail(e)

    logger.debug("Decrypted value for owner %r", owner)
    # Raw bytes: the plaintext need not be valid UTF-8
    typer.echo(plaintext.to_bytes())


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
