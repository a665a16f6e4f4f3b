from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Awaitable, Callable

import anyio
import rich_click as click
import structlog
from pydantic import BaseModel

from .config import ContentsConfig
from .contents import Contents
from .contents.models import ContentsOptions
from .exceptions import ContentsError


def run(ctx: click.Context, operation: Callable[[Contents], Awaitable[Any]]) -> None:
    config: ContentsConfig = ctx.obj

    async def _run() -> Any:
        async with Contents.from_config(config) as contents:
            return await operation(contents)

    try:
        result = anyio.run(_run)
    except ContentsError as e:
        raise click.ClickException(str(e)) from e
    if result is not None:
        click.echo(json.dumps(to_json(result), indent=2))


def to_json(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(exclude_unset=True)
    if isinstance(result, list):
        return [to_json(item) for item in result]
    return result


@click.group()  # type: ignore
@click.option(
    "--url",
    type=str,
    default="http://127.0.0.1:8000",
    show_default=True,
    help="The base URL of the Jupyter server.",
)
@click.option(
    "--token",
    type=str,
    default=None,
    help="The token used to authenticate.",
)
@click.option(
    "--debug",
    is_flag=True,
    show_default=True,
    default=False,
    help="Enable debug mode.",
)
@click.pass_context
def main(ctx: click.Context, url: str, token: str | None, debug: bool) -> None:
    ctx.obj = ContentsConfig(base_url=url, token=token, debug=debug)
    # logs go to stderr, so that stdout only has the results
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if ctx.obj.debug else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


@main.command()
@click.argument("path", default="")
@click.option("--type", "type_", type=str, default=None, help="The content type.")
@click.option("--format", "format_", type=str, default=None, help="The content format.")
@click.option("--no-content", is_flag=True, default=False, help="Don't return the content.")
@click.pass_context
def get(
    ctx: click.Context, path: str, type_: str | None, format_: str | None, no_content: bool
) -> None:
    """Get a file or directory."""
    options = ContentsOptions()
    if type_ is not None:
        options.type = type_
    if format_ is not None:
        options.format = format_
    if no_content:
        options.content = False
    run(ctx, lambda contents: contents.get(path, options))


@main.command()
@click.argument("path", default="")
@click.pass_context
def ls(ctx: click.Context, path: str) -> None:
    """List a directory."""
    run(ctx, lambda contents: contents.list_contents(path))


@main.command()
@click.argument("path", default="")
@click.option("--type", "type_", type=str, default=None, help="notebook, directory or file.")
@click.option("--ext", type=str, default=None, help="The file extension.")
@click.pass_context
def new(ctx: click.Context, path: str, type_: str | None, ext: str | None) -> None:
    """Create a new untitled file or directory."""
    options = None
    if type_ is not None or ext is not None:
        options = ContentsOptions(type=type_, ext=ext)
    run(ctx, lambda contents: contents.new_untitled(path, options))


@main.command()
@click.argument("path")
@click.argument("model_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def save(ctx: click.Context, path: str, model_file: Path) -> None:
    """Save a content model, read as JSON from MODEL_FILE."""
    model = json.loads(model_file.read_text())
    run(ctx, lambda contents: contents.save(path, model))


@main.command()
@click.argument("path")
@click.argument("new_path")
@click.pass_context
def mv(ctx: click.Context, path: str, new_path: str) -> None:
    """Rename a file or directory."""
    run(ctx, lambda contents: contents.rename(path, new_path))


@main.command()
@click.argument("from_path")
@click.argument("to_dir")
@click.pass_context
def cp(ctx: click.Context, from_path: str, to_dir: str) -> None:
    """Copy a file into a directory."""
    run(ctx, lambda contents: contents.copy(from_path, to_dir))


@main.command()
@click.argument("path")
@click.pass_context
def rm(ctx: click.Context, path: str) -> None:
    """Delete a file or directory."""
    run(ctx, lambda contents: contents.delete(path))


@main.group()
def checkpoint() -> None:
    """Manage the checkpoints of a file."""


@checkpoint.command("create")
@click.argument("path")
@click.pass_context
def create_checkpoint(ctx: click.Context, path: str) -> None:
    run(ctx, lambda contents: contents.create_checkpoint(path))


@checkpoint.command("list")
@click.argument("path")
@click.pass_context
def list_checkpoints(ctx: click.Context, path: str) -> None:
    run(ctx, lambda contents: contents.list_checkpoints(path))


@checkpoint.command("restore")
@click.argument("path")
@click.argument("checkpoint_id")
@click.pass_context
def restore_checkpoint(ctx: click.Context, path: str, checkpoint_id: str) -> None:
    run(ctx, lambda contents: contents.restore_checkpoint(path, checkpoint_id))


@checkpoint.command("delete")
@click.argument("path")
@click.argument("checkpoint_id")
@click.pass_context
def delete_checkpoint(ctx: click.Context, path: str, checkpoint_id: str) -> None:
    run(ctx, lambda contents: contents.delete_checkpoint(path, checkpoint_id))
