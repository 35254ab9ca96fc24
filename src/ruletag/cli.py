"""CLI interface for ruletag using Typer framework."""

import dataclasses
import json as jsonlib
import logging
from importlib import import_module
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ruletag import __description__, __version__
from ruletag.config import LogLevel, load_config
from ruletag.registry import get_default_registry
from ruletag.tags import parse_rule_tag
from ruletag.validator import Validator

app = typer.Typer(
    name="ruletag",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console(emoji=False)


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"ruletag version {__version__}")
        raise typer.Exit()


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.to_logging(),
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """ruletag - declarative per-field validation for Python records."""


@app.command()
def rules() -> None:
    """List the registered rule names."""
    registry = get_default_registry()

    table = Table(title="Registered Rules")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Kind", style="white")

    for name in registry.names():
        table.add_row(name, "built-in" if registry.is_builtin(name) else "custom")

    console.print(table)


@app.command("parse-tag")
def parse_tag(
    tag: Annotated[
        str,
        typer.Argument(help="Rule tag to parse, e.g. 'required|in:a,b,c'")
    ],
) -> None:
    """Show how a rule tag is split into rules and parameters."""
    specs = parse_rule_tag(tag)
    if not specs:
        console.print("[yellow]Tag is empty or disabled - no rules will run[/yellow]")
        return

    registry = get_default_registry()
    table = Table(title=f"Rule tag: {escape(tag)}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Rule", style="cyan")
    table.add_column("Parameter", style="white")
    table.add_column("Known", style="white")

    for index, spec in enumerate(specs, 1):
        known = "[green]yes[/green]" if spec.name in registry else "[yellow]skipped[/yellow]"
        table.add_row(str(index), escape(spec.name), escape(spec.param or ""), known)

    console.print(table)


def _import_model(target: str) -> type:
    """Resolve ``module:Class`` to a record class."""
    module_name, sep, class_name = target.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Model must be given as module:Class, got '{target}'")

    module = import_module(module_name)
    model = getattr(module, class_name, None)
    if model is None:
        raise ValueError(f"Module '{module_name}' has no attribute '{class_name}'")
    return model


def _build_record(model: type, data: Any) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    if isinstance(model, type) and issubclass(model, BaseModel):
        return model.model_validate(data)
    if dataclasses.is_dataclass(model):
        return model(**data)
    raise ValueError(f"{model!r} is not a dataclass or pydantic model")


@app.command()
def validate(
    data: Annotated[
        Path,
        typer.Argument(help="JSON file holding the record to validate")
    ],
    model: Annotated[
        str,
        typer.Option("--model", "-m", help="Record class as module:Class")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .ruletag.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Validate a JSON record against the rule tags of a model."""
    valid_formats = ["table", "json"]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        ruletag_config = load_config(config)
        _configure_logging(LogLevel.DEBUG if verbose else ruletag_config.logging.level)

        record_type = _import_model(model)
        with open(data, encoding="utf-8") as f:
            record = _build_record(record_type, jsonlib.load(f))

        bag = Validator.from_config(ruletag_config).validate(record)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except PydanticValidationError as e:
        console.print(f"[red]Error:[/red] Record could not be built: {escape(str(e))}")
        raise typer.Exit(1)
    except (ValueError, TypeError, ImportError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if format == "json":
        console.print(jsonlib.dumps(bag.to_dict(), indent=2), markup=False, highlight=False, soft_wrap=True)
    elif bag:
        table = Table(title="Validation Errors")
        table.add_column("Field", style="cyan")
        table.add_column("Message", style="white")
        for path, messages in bag.items():
            for message in messages:
                table.add_row(escape(path), escape(message))
        console.print(table)
    else:
        console.print("[green]No validation errors found![/green]")

    raise typer.Exit(1 if bag else 0)
