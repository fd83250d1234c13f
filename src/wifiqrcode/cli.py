"""Command-line entry point: write a Wi-Fi QR code image to a file."""

import asyncio
import logging
import sys
from pathlib import Path

import typer

from wifiqrcode.constants import (
    AUTH_TYPES,
    DEFAULT_AUTH_TYPE,
    DEFAULT_QR_ERROR_CORRECTION,
    ERROR_CORRECTION_LEVELS,
    OUTPUT_TYPES,
)
from wifiqrcode.errors import MissingPasswordError
from wifiqrcode.services.qr_renderer import (
    OutputType,
    QrOptions,
    RenderOptions,
    parse_error_correction,
    parse_output_type,
)
from wifiqrcode.services.qr_service import create_qr_code
from wifiqrcode.services.wifi_payload import AuthType, WifiConfig, parse_auth_type

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help=(
        "Command-line util to generate a QR code image that allows mobile devices "
        "to connect to a Wifi network"
    ),
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def read_password(password: str | None, auth_type: AuthType) -> str | None:
    """Return the password, reading it from stdin when an authenticated type needs one."""
    if password or auth_type is AuthType.NOPASS:
        return password

    typer.echo("No password provided via command-line argument; enter it now...", err=True)
    typer.echo("Press Return and then Ctrl-D when done.", err=True)
    password = sys.stdin.read().strip()
    if not password:
        raise MissingPasswordError(auth_type.value)
    return password


async def write_qr_code(
    path: Path,
    config: WifiConfig,
    output_type: OutputType | None,
    width: int | None,
    error_correction: str,
) -> None:
    """Encode ``config`` and write its QR code to ``path``."""
    code = create_qr_code(config, QrOptions(error_correction=error_correction))
    await code.to_file(path, RenderOptions(output_type=output_type, width=width))


@app.command()
def generate(
    ctx: typer.Context,
    path: Path | None = typer.Argument(None, help="Where to write the QR code image."),
    ssid: str = typer.Option(..., "--ssid", "-s", help="The SSID of the network."),
    hidden: bool = typer.Option(
        False, "--hidden", "-h", help="Indicates that the network does not broadcast its SSID."
    ),
    auth_type: str = typer.Option(
        DEFAULT_AUTH_TYPE,
        "--type",
        "-t",
        help=(
            f"Authentication type, one of [{','.join(AUTH_TYPES)}]. "
            "If omitted, no password is assumed."
        ),
    ),
    password: str | None = typer.Option(
        None, "--password", "-p", help="The password; alternately, provide it via stdin."
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help=(
            f"Output image type, one of [{','.join(OUTPUT_TYPES)}]. "
            "If omitted, type will be guessed from the output file ext."
        ),
    ),
    width: int | None = typer.Option(
        None, "--width", "-w", min=1, help="Width (in pixels) of the output image."
    ),
    error_correction: str = typer.Option(
        DEFAULT_QR_ERROR_CORRECTION,
        "--error-correction",
        "-e",
        help=f"Error correction level, one of [{','.join(ERROR_CORRECTION_LEVELS)}].",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Generate a Wi-Fi QR code image."""
    if path is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    _configure_logging(verbose)

    try:
        parsed_type = parse_auth_type(auth_type)
        output_type = parse_output_type(output) if output else None
        level = parse_error_correction(error_correction)
        config = WifiConfig(
            ssid=ssid,
            password=read_password(password, parsed_type),
            auth_type=parsed_type,
            hidden=hidden,
        )
        asyncio.run(write_qr_code(path, config, output_type, width, level))
    except Exception as exc:
        logger.debug("QR code generation failed", exc_info=True)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Wrote QR code to {path}")


def main() -> None:
    """Run the command-line app."""
    app()


if __name__ == "__main__":
    main()
