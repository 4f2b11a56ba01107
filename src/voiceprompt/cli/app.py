"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..config import PipelineConfig
from ..errors import UnknownTargetError, ValidationError
from ..formatting import FormattedPrompt, supported_targets
from ..formatting.factory import get_formatter
from ..llm import SUPPORTED_PROVIDERS
from ..pipeline import FormatRequest, PromptPipeline, StructureRequest
from ..structuring import StructuredPrompt
from .providers import configure_logging, get_config, get_history, get_pipeline

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="voiceprompt",
    help="Turn free-form requests into structured prompts for several LLMs",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

EXIT_COMMANDS = ("/quit", "/exit", "exit", "quit", "q")


def _config(ctx: typer.Context) -> PipelineConfig:
    return ctx.obj["config"]


def _print_structured(prompt: StructuredPrompt) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold cyan", width=14)
    table.add_column("Value")

    table.add_row("Title", escape(prompt.title))
    table.add_row("Intent", prompt.intent.value)
    table.add_row("Quality", f"{prompt.quality_score}/100")
    table.add_row("Requirements", escape("\n".join(f"- {r}" for r in prompt.requirements)) or "None")
    table.add_row("Constraints", escape("\n".join(f"- {c}" for c in prompt.constraints)) or "None")
    table.add_row("Output", escape(prompt.output_format))

    console.print(table)
    console.print(Panel(Text(prompt.full_prompt), title="Structured Prompt", border_style="cyan"))


def _print_formatted(outputs: list[FormattedPrompt]) -> None:
    for output in outputs:
        console.print(Panel(
            Text(output.rendered_text),
            title=f"{output.target_name} [dim]({output.description})[/dim]",
            border_style="green"
        ))


@app.callback()
def main_options(
    ctx: typer.Context,
    api_key: str | None = typer.Option(
        None,
        "--api-key",
        help="Hosted model credential (enables delegation; default: VOICEPROMPT_API_KEY)"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        help="Hosted model identifier (default: VOICEPROMPT_MODEL)"
    ),
    locale: str | None = typer.Option(
        None,
        "--locale",
        help="Request locale, e.g. en-US or hi-IN (default: VOICEPROMPT_LOCALE)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging"
    ),
):
    """Global options shared by every command."""
    configure_logging(verbose, console)
    ctx.obj = {"config": get_config(api_key=api_key, model=model, locale=locale, console=console)}


@app.command()
def structure(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Request to structure"),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the structured prompt as JSON"
    )
):
    """Structure a single request into an optimized prompt."""
    async def _structure():
        pipeline = get_pipeline(_config(ctx))
        try:
            prompt = await pipeline.structure(StructureRequest(transcript=text))
        except ValidationError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(code=1)

        if json_output:
            console.print_json(data=prompt.model_dump(mode="json", by_alias=True))
        else:
            _print_structured(prompt)

    asyncio.run(_structure())


@app.command()
def format(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Request to structure and format"),
    target: str | None = typer.Option(
        None,
        "--target",
        "-t",
        help="Only render this target (see 'voiceprompt targets')"
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the formatted prompts as JSON"
    )
):
    """Structure a request and render it for each target model."""
    async def _format():
        pipeline = get_pipeline(_config(ctx))
        try:
            if target:
                get_formatter(target)
            prompt = await pipeline.structure(StructureRequest(transcript=text))
            outputs = await pipeline.format(FormatRequest(prompt=prompt, target_name=target))
        except (ValidationError, UnknownTargetError) as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(code=1)

        if json_output:
            console.print_json(data=[o.model_dump(mode="json", by_alias=True) for o in outputs])
        else:
            _print_formatted(outputs)

    asyncio.run(_format())


@app.command()
def targets():
    """List the supported target models."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("Target", style="cyan")
    table.add_column("Style")

    for i, name in enumerate(supported_targets(), 1):
        table.add_row(str(i), name, get_formatter(name).description)

    console.print(table)


@app.command()
def health(ctx: typer.Context):
    """Show configuration and hosted-model credential status."""
    config = _config(ctx)

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="bold cyan", width=18)
    table.add_column("Value")

    table.add_row("Version", __version__)
    table.add_row("Locale", config.locale)
    table.add_row("Word threshold", str(config.word_threshold))
    table.add_row("Turn ceiling", str(config.turn_ceiling))
    table.add_row("Provider", config.provider)
    table.add_row("Model", config.model_id)
    table.add_row("Adapter timeout", f"{config.adapter_timeout:g}s")
    table.add_row("Targets", ", ".join(supported_targets()))
    console.print(table)

    if config.provider.lower() not in SUPPORTED_PROVIDERS:
        console.print(f"[yellow]![/yellow] Provider {config.provider}: UNKNOWN, rule-based engine only")
    elif config.has_credential:
        console.print("[green]+[/green] Hosted model credential: SET")
    else:
        console.print("[yellow]![/yellow] Hosted model credential: NOT SET, rule-based engine only")


@app.command()
def chat(ctx: typer.Context):
    """Interactive multi-turn session that ends in formatted prompts."""
    async def _chat():
        pipeline: PromptPipeline = get_pipeline(_config(ctx))
        history = get_history(pipeline)
        session = pipeline.new_session()

        console.print("[bold cyan]Voiceprompt Interactive Chat[/bold cyan]")
        console.print("[dim]Commands: /reset, /history, /quit[/dim]\n")
        console.print(f"[bold green]Assistant:[/bold green] {session.welcome_message()}\n")

        while True:
            try:
                user_input = console.input("[bold yellow]You:[/bold yellow] ").strip()
            except (KeyboardInterrupt, EOFError):
                console.print("\n[dim]Goodbye![/dim]")
                break

            if not user_input:
                continue

            command = user_input.lower()
            if command in EXIT_COMMANDS:
                console.print("[dim]Goodbye![/dim]")
                break

            if command == "/reset":
                session.reset()
                console.print("[dim]Started a new session.[/dim]\n")
                continue

            if command == "/history":
                saved = await history.list_recent()
                if not saved:
                    console.print("[yellow]No prompts yet[/yellow]\n")
                    continue
                table = Table(show_header=True, header_style="bold cyan")
                table.add_column("Title", style="cyan")
                table.add_column("Intent", style="yellow", width=16)
                table.add_column("Score", style="green", width=6)
                for item in saved:
                    table.add_row(escape(item.title), item.intent.value, str(item.quality_score))
                console.print(table)
                continue

            reply = await pipeline.advance(session, user_input)
            console.print(f"[bold green]Assistant:[/bold green] {escape(reply.response_text)}\n")

            if not reply.should_structure:
                continue

            prompt = await pipeline.structure(StructureRequest(
                transcript=session.combined_transcript(),
                from_conversation=len(session.state.raw_transcripts) > 1,
            ))
            _print_structured(prompt)
            _print_formatted(await pipeline.format(FormatRequest(prompt=prompt)))

            session.reset()
            console.print(f"[bold green]Assistant:[/bold green] {session.welcome_message()}\n")

    asyncio.run(_chat())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
