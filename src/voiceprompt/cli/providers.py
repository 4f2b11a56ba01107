"""Pipeline factory functions for CLI.

Centralizes creation of the configuration, pipeline and history from
environment variables and global options. Hides configuration details
from command implementations.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..config import PipelineConfig
from ..history import PromptHistory, create_prompt_history
from ..pipeline import PromptPipeline, StructuringCompleted

_console = Console()


def configure_logging(verbose: bool, console: Console | None = None) -> None:
    """Route library logs through rich.

    Args:
        verbose: Show DEBUG records instead of WARNING and above
        console: Optional Rich console for output
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or _console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def get_config(
    api_key: str | None = None,
    model: str | None = None,
    locale: str | None = None,
    console: Console | None = None
) -> PipelineConfig:
    """Create pipeline configuration from environment variables and options.

    Options given on the command line win over the environment.

    Raises:
        SystemExit: If the resulting configuration is invalid
    """
    import typer
    from pydantic import ValidationError as PydanticValidationError

    con = console or _console
    try:
        config = PipelineConfig.from_env()
        overrides = {
            key: value
            for key, value in {"api_key": api_key, "model_id": model, "locale": locale}.items()
            if value
        }
        if overrides:
            config = PipelineConfig.model_validate({**config.model_dump(), **overrides})
    except (PydanticValidationError, ValueError) as e:
        con.print(f"[red]Error: invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    return config


def get_pipeline(config: PipelineConfig) -> PromptPipeline:
    """Create the prompt pipeline."""
    return PromptPipeline(config)


def get_history(pipeline: PromptPipeline) -> PromptHistory:
    """Create an in-memory history subscribed to the pipeline's completions."""
    history = create_prompt_history("memory", max_items=pipeline.config.max_history_items)

    async def _record(event: StructuringCompleted) -> None:
        await history.record(event.prompt, event.transcript, event.locale)

    pipeline.subscribe(_record)
    return history
