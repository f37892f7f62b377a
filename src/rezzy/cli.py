"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from rezzy.config import AppConfig, load_config, validate_provider_config
from rezzy.exceptions import RezzyError
from rezzy.logging.run_log import RunLog, write_run_log
from rezzy.parsers.job_description import load_job_description
from rezzy.pipeline.orchestrator import RezzyOrchestrator
from rezzy.providers import create_provider

app = typer.Typer(
    name="rezzy",
    help="Render a JSON Resume as a LaTeX resume and an AI-written cover letter",
    no_args_is_help=True,
)
# LaTeX goes to stdout; everything meant for humans goes to stderr
console = Console(stderr=True)

# Failures a user can fix by changing input or configuration
USER_ERRORS = (RezzyError, ValueError, OSError)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=verbose)],
        force=True,
    )


def _load_config(path: Path | None) -> AppConfig:
    try:
        return load_config(path)
    except (ValueError, TypeError, yaml.YAMLError) as exc:
        console.print(f"[red]Invalid configuration: {escape(str(exc))}[/red]")
        raise typer.Exit(1)


async def _close(provider) -> None:
    aclose = getattr(provider, "aclose", None)
    if aclose is not None:
        await aclose()


async def _run_build(orchestrator: RezzyOrchestrator, **kwargs):
    try:
        return await orchestrator.run(**kwargs)
    finally:
        await _close(orchestrator.provider)


def _write_lines(path: Path, lines: list[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@app.command()
def build(
    resume: str = typer.Option(None, "--resume", "-r", help="JSON Resume URL or file path"),
    document: Path = typer.Option(None, "--document", "-d", help="Resume PDF to convert with the LLM provider"),
    jd: Path = typer.Option(None, "--jd", help="Job description file (text or PDF); enables the cover letter"),
    prompt: str = typer.Option(None, "--prompt", "-p", help="Extra instructions for the cover letter"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the LaTeX resume to this file"),
    cover_output: Path = typer.Option(None, "--cover-output", help="Write the LaTeX cover letter to this file"),
    save_json: Path = typer.Option(None, "--save-json", help="Save the resume JSON used for rendering"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to rezzy.yaml"),
    no_log: bool = typer.Option(False, "--no-log", help="Skip the run log dump"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Build the LaTeX resume and, with --jd, a cover letter."""
    _setup_logging(verbose)
    if (resume is None) == (document is None):
        console.print("[red]Provide exactly one of --resume or --document.[/red]")
        raise typer.Exit(1)
    if document is not None and not document.exists():
        console.print(f"[red]Document not found: {document}[/red]")
        raise typer.Exit(1)
    if jd is not None and not jd.exists():
        console.print(f"[red]Job description file not found: {jd}[/red]")
        raise typer.Exit(1)

    config = _load_config(config_path)

    try:
        jd_text = load_job_description(jd) if jd is not None else None
        provider = None
        if document is not None or jd_text:
            provider = create_provider(config.llm)
        orchestrator = RezzyOrchestrator(provider)
        with console.status("Building documents..."):
            result = asyncio.run(
                _run_build(
                    orchestrator,
                    resume_source=resume,
                    document=document,
                    job_description=jd_text,
                    prompt=prompt,
                )
            )
    except USER_ERRORS as exc:
        logging.getLogger(__name__).debug("Build failed", exc_info=True)
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1)

    if save_json is not None:
        save_json.parent.mkdir(parents=True, exist_ok=True)
        save_json.write_text(
            json.dumps(result.resume.to_json_dict(), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        console.print(f"[green]Resume JSON saved: {save_json}[/green]")

    if output is not None:
        _write_lines(output, result.latex_resume)
        console.print(f"[green]Resume saved: {output}[/green]")
    if cover_output is not None and result.latex_cover_letter is not None:
        _write_lines(cover_output, result.latex_cover_letter)
        console.print(f"[green]Cover letter saved: {cover_output}[/green]")

    # raw echo; rich markup would eat LaTeX option brackets
    shown = result.latex_cover_letter if result.latex_cover_letter is not None else result.latex_resume
    typer.echo("\n".join(shown))

    if not no_log and config.output.write_run_log:
        run_log = RunLog(
            inputs={
                "resume": resume,
                "document": str(document) if document else None,
                "jd": str(jd) if jd else None,
                "prompt": prompt,
            },
            provider=result.metadata.get("provider"),
            usage=result.metadata.get("usage"),
            resume=result.resume.to_json_dict(),
            letter=result.letter.model_dump(by_alias=True) if result.letter else None,
            latex_resume=result.latex_resume,
            latex_cover_letter=result.latex_cover_letter,
            elapsed_seconds=result.elapsed_seconds,
        )
        path = write_run_log(run_log, config.output.resolved_log_dir)
        console.print(f"[dim]Run log: {path}[/dim]")


@app.command("parse-document")
def parse_document(
    file: Path = typer.Argument(help="Resume PDF to convert to JSON Resume"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the JSON here instead of stdout"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to rezzy.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Convert a resume document into JSON Resume with the configured provider."""
    _setup_logging(verbose)
    if not file.exists():
        console.print(f"[red]Document not found: {file}[/red]")
        raise typer.Exit(1)

    config = _load_config(config_path)
    try:
        orchestrator = RezzyOrchestrator(create_provider(config.llm))

        async def _convert():
            try:
                return await orchestrator.load_resume(document=file)
            finally:
                await _close(orchestrator.provider)

        with console.status(f"Converting {file.name}..."):
            parsed = asyncio.run(_convert())
    except USER_ERRORS as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1)

    text = json.dumps(parsed.to_json_dict(), indent=2, ensure_ascii=False)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]Resume JSON saved: {output}[/green]")


@app.command("check-config")
def check_config(
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to rezzy.yaml"),
) -> None:
    """Check that the selected provider has what it needs."""
    _setup_logging(False)
    config = _load_config(config_path)
    llm = config.llm
    try:
        validate_provider_config(llm)
    except RezzyError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)

    model = getattr(llm, llm.provider).model
    console.print(Panel(
        f"Provider: [bold]{llm.provider}[/bold]\n"
        f"Model: {model}\n"
        f"Timeout: {llm.timeout}s, retries: {llm.max_retries}\n"
        f"Run log directory: {config.output.resolved_log_dir}",
        title="Configuration OK",
    ))


if __name__ == "__main__":
    app()
