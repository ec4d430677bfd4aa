"""
bright CLI.

Commands:
- list: show all devices with their brightness
- meta: show details about one device
- set:  evaluate a brightness expression and animate towards it
"""

from __future__ import annotations

import logging
import os
import time
from datetime import timedelta

import typer
from rich.console import Console
from rich.markup import escape

from bright import __version__
from bright.core.animation import AnimationIter, frame_count, frame_interval, parse_duration
from bright.core.config import Easings, find_config
from bright.core.easing import EasingError, parse_easing
from bright.core.errors import BrightError
from bright.core.expression_lang import ExpressionError, evaluate, parse_expr
from bright.core.restoration import RestoreStore
from bright.device import (
    UNNAMED,
    BrightnessOverflowError,
    DeviceError,
    DeviceReadError,
    DeviceWriteError,
    all_devices,
    get_device,
)
from bright.device.base import perceptual_percent

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "BRIGHT_LOG_LEVEL"

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

app = typer.Typer(
    help="""bright - brightness control with perceptual easing

Expressions:
  • 500, 50%         absolute raw value / perceptual percentage
  • 100+, 10%-       relative to the current brightness
  • current, restore builtins without arguments
  • clamp(20, 200+, 90%), min(...), max(...)
""",
    no_args_is_help=True,
)


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]{escape(message)}[/red]")
    return typer.Exit(code=1)


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bright {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    easing: str | None = typer.Option(
        None,
        "--easing",
        "-e",
        help="Easing for every device, e.g. x, x^2 or 3^x (overrides the config file)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
) -> None:
    """bright CLI main callback for global options."""
    _configure_logging(verbose)

    try:
        config = find_config()
    except BrightError as e:
        raise _fail(str(e))

    easings = config.easings
    if easing is not None:
        try:
            easings = Easings.uniform(parse_easing(easing))
        except EasingError as e:
            raise _fail(f"Invalid easing {easing!r}: {e}")

    ctx.obj = {"easings": easings, "fps": config.animation.fps}


def _easings(ctx: typer.Context) -> Easings:
    easings: Easings = ctx.obj["easings"]
    return easings


def list_command(ctx: typer.Context) -> None:
    """List all devices with their current brightness."""
    easings = _easings(ctx)

    for device_class, devices in all_devices().items():
        console.print(f"[underline]{device_class}[/underline]:")
        for device in devices:
            easing = easings.get_or_default(device.name)
            max_brightness = device.max_brightness
            try:
                cur: int | None = device.current()
            except DeviceReadError as e:
                logger.warning("Can't read %s: %s", device.dev_path, e)
                cur = None

            line = f"\t{device.name or UNNAMED} {device.dev_path}"
            if cur is None:
                line += f" ?/{max_brightness}"
            else:
                percent = perceptual_percent(cur, max_brightness, easing)
                line += f" {cur}/{max_brightness} ({percent:.1f}%)"
            console.print(escape(line))


def meta_command(
    ctx: typer.Context,
    device_name: str | None = typer.Option(None, "--device", "-d", help="Device name"),
) -> None:
    """Show details about a device."""
    try:
        device = get_device(device_name)
    except DeviceError as e:
        raise _fail(str(e))

    easing = _easings(ctx).get_or_default(device.name)
    for info in device.meta(easing):
        console.print(escape(str(info)))


def set_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Brightness expression, e.g. 50%+ or restore"),
    device_name: str | None = typer.Option(None, "--device", "-d", help="Device name"),
    duration: str | None = typer.Option(
        None, "--duration", "-t", help="Length of the transition, e.g. 500ms or 2s"
    ),
    fps: int | None = typer.Option(
        None, "--fps", min=1, max=1000, help="Frames per second (default: config or 30)"
    ),
    save: bool = typer.Option(
        False, "--save", help="Save the previous brightness for a later `restore`"
    ),
) -> None:
    """Set the brightness of a device."""
    try:
        expr = parse_expr(expression)
    except ExpressionError as e:
        raise _fail(f"Invalid expression {expression!r}: {e}")

    transition: timedelta | None = None
    if duration is not None:
        try:
            transition = parse_duration(duration)
        except ValueError as e:
            raise _fail(str(e))

    fps = fps or ctx.obj["fps"]

    try:
        device = get_device(device_name)
    except DeviceError as e:
        raise _fail(str(e))

    easing = _easings(ctx).get_or_default(device.name)
    name = device.name or UNNAMED
    console.print(f"Updating device: '{escape(name)}'")

    try:
        previous = device.current()
    except DeviceReadError as e:
        raise _fail(f"Reading current brightness: {e}")

    try:
        desired = evaluate(expr, device, easing)
    except BrightError as e:
        raise _fail(f"While determining the brightness encountered an error: {e}")

    if save:
        try:
            path = RestoreStore().save(name, previous)
        except BrightError as e:
            raise _fail(str(e))
        console.print(f"Wrote previous brightness of {previous} to {escape(str(path))}")

    if previous == desired:
        console.print(f"Already at the desired brightness of {desired}")
        return

    console.print(f"Previously: {previous}")

    frames = AnimationIter(
        previous, desired, device.max_brightness, frame_count(transition, fps), easing
    )
    pause = frame_interval(fps).total_seconds()
    logger.debug("Animating %s in %d frames", name, len(frames))

    last_applied: int | None = None
    for brightness, is_last in frames:
        try:
            last_applied = device.set(brightness)
            console.print(f"Updated: {last_applied}")
        except BrightnessOverflowError as e:
            raise _fail(
                f"Tried setting the brightness to {e.provided} "
                f"even though only {e.max} is supported"
            )
        except DeviceWriteError as e:
            if isinstance(e.cause, PermissionError):
                raise _fail(f"{e}\nTip: Set an udev rule or run with elevated privileges")
            err_console.print(f"[red]{escape(str(e))}[/red]")

        if not is_last:
            time.sleep(pause)

    console.print(f"Finished: {last_applied if last_applied is not None else previous}")


app.command(name="list")(list_command)
app.command(name="ls", hidden=True)(list_command)
app.command(name="l", hidden=True)(list_command)
app.command(name="meta")(meta_command)
app.command(name="info", hidden=True)(meta_command)
app.command(name="set")(set_command)


def main() -> None:
    app()
