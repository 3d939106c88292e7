"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from hiresight.config import load_config
from hiresight.controller import ActionKind, AssistantController
from hiresight.export import (
    REWRITTEN_RESUME_FILENAME,
    compatibility_label,
    feedback_style,
    render_report_html,
    render_report_markdown,
    render_report_pdf,
    report_filename,
)
from hiresight.i18n import translate
from hiresight.models.analysis import CandidateAnalysisResult
from hiresight.models.interview import InterviewPerformanceResult
from hiresight.models.settings import AVAILABLE_MODELS, LlmProvider
from hiresight.parsers.content_input import InputSource
from hiresight.storage import SettingsStore

app = typer.Typer(
    name="hiresight",
    help="AI job-fit analysis, interview review and resume rewriting",
    no_args_is_help=True,
)
settings_app = typer.Typer(help="Show or change the saved provider settings", no_args_is_help=True)
app.add_typer(settings_app, name="settings")
console = Console()

_LABEL_COLORS = {"high": "green", "medium": "yellow", "low": "red"}
_FEEDBACK_COLORS = {"success": "green", "warning": "yellow", "danger": "red"}
_STATUS_COLORS = {"Match": "green", "Partial": "yellow", "No Match": "red"}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _controller(language: str) -> AssistantController:
    config = load_config()
    store = SettingsStore(config.storage.resolved_state_path)
    return AssistantController(store, app_config=config, language=language)


def _source(text: str | None, file: Path | None, url: str | None, label: str) -> InputSource | None:
    given = [v for v in (text, file, url) if v]
    if len(given) > 1:
        console.print(f"[red]Give the {label} as only one of text, file or URL[/red]")
        raise typer.Exit(2)
    if text:
        return InputSource.text(text)
    if file:
        return InputSource.file(file)
    if url:
        return InputSource.url(url)
    return None


def _run(controller: AssistantController, kind: ActionKind, description: str, *args):
    """Run one action with a spinner; exit non-zero if it failed."""

    async def _go():
        task = controller.start(kind, *args)
        return await task

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(description, total=None)
        result = asyncio.run(_go())

    status = controller.state.status[kind]
    if status.error:
        console.print(f"[red]{status.error}[/red]")
        raise typer.Exit(1)
    return result


def _print_analysis(result: CandidateAnalysisResult, language: str) -> None:
    label = compatibility_label(result.overall_fit_score)
    color = _LABEL_COLORS[label]
    console.print(
        Panel(
            f"[bold {color}]{result.overall_fit_score}/100 · "
            f"{translate(f'results.score.{label}', language)}[/bold {color}]\n\n"
            f"{result.summary}\n\n[dim]{result.fit_explanation}[/dim]",
            title=result.job_title,
        )
    )

    for title_key, section in (
        ("report.keyResponsibilities", result.key_responsibilities_match),
        ("report.requiredSkills", result.required_skills_match),
        ("report.niceToHaveSkills", result.nice_to_have_skills_match),
    ):
        table = Table(title=f"{translate(title_key, language)} ({section.score}/100)", show_lines=True)
        table.add_column("Item")
        table.add_column("Status")
        table.add_column("Explanation")
        for item in section.items:
            c = _STATUS_COLORS[item.status]
            table.add_row(item.item, f"[{c}]{item.status}[/{c}]", item.explanation)
        console.print(table)

    for title_key, items in (
        ("report.strengths", result.strengths),
        ("report.gaps", result.compatibility_gaps),
        ("report.actionPlan", result.action_plan),
    ):
        if items:
            console.print(Panel("\n".join(f"• {i}" for i in items), title=translate(title_key, language)))


def _print_interview(result: InterviewPerformanceResult, language: str) -> None:
    color = _FEEDBACK_COLORS[feedback_style(result.overall_feedback)]
    console.print(
        Panel(
            f"[bold {color}]{result.overall_feedback}[/bold {color}] · "
            f"{translate('report.performanceScore', language)}: {result.performance_score}/100 · "
            f"{translate('report.postInterviewFitScore', language)}: {result.post_interview_fit_score}/100"
            f"\n\n{result.summary}",
            title=translate("report.interview", language),
        )
    )
    table = Table(title=translate("report.gapResolutions", language), show_lines=True)
    table.add_column("Gap")
    table.add_column("")
    table.add_column("Resolution")
    for item in result.gap_resolutions.items:
        mark = "[green]✓[/green]" if item.is_resolved else "[red]✗[/red]"
        table.add_row(item.gap, mark, item.resolution)
    console.print(table)


def _write_report(path: Path, controller: AssistantController) -> None:
    state = controller.state
    md = render_report_markdown(
        state.analysis, state.interview, state.rewrite, language=state.language
    )
    title = translate("report.title", state.language)
    if path.is_dir():
        path = path / report_filename(state.analysis.job_title)
    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        path.write_bytes(render_report_pdf(md, title, theme=state.theme, language=state.language))
    elif suffix in (".html", ".htm"):
        path.write_text(render_report_html(md, title, theme=state.theme, language=state.language), encoding="utf-8")
    else:
        path.write_text(md, encoding="utf-8")
    console.print(f"[green]Report saved: {path}[/green]")


def _analyze_first(controller, job_text, job_file, job_url, resume_text, resume_file) -> CandidateAnalysisResult:
    job = _source(job_text, job_file, job_url, "job description")
    resume = _source(resume_text, resume_file, None, "resume")
    return _run(controller, ActionKind.ANALYZE, "Analyzing fit...", job, resume)


_JOB_TEXT = typer.Option(None, "--job-text", help="Job description text")
_JOB_FILE = typer.Option(None, "--job-file", help="Job description file (PDF/DOCX)")
_JOB_URL = typer.Option(None, "--job-url", help="Job posting URL")
_RESUME_TEXT = typer.Option(None, "--resume-text", help="Resume text")
_RESUME_FILE = typer.Option(None, "--resume-file", help="Resume file (PDF/DOCX)")
_LANG = typer.Option("en", "--lang", "-l", help="Output language: en, pt or es")
_VERBOSE = typer.Option(False, "--verbose", "-v", help="Verbose logging")


@app.command()
def analyze(
    job_text: str = _JOB_TEXT,
    job_file: Path = _JOB_FILE,
    job_url: str = _JOB_URL,
    resume_text: str = _RESUME_TEXT,
    resume_file: Path = _RESUME_FILE,
    report: Path = typer.Option(None, "--report", "-o", help="Save report (.md, .html or .pdf)"),
    language: str = _LANG,
    verbose: bool = _VERBOSE,
) -> None:
    """Score a resume against a job description."""
    _setup_logging(verbose)
    controller = _controller(language)
    result = _analyze_first(controller, job_text, job_file, job_url, resume_text, resume_file)
    _print_analysis(result, controller.state.language)
    if report is not None:
        _write_report(report, controller)


@app.command()
def interview(
    transcript: Path = typer.Option(..., "--transcript", help="Interview transcript text file"),
    job_text: str = _JOB_TEXT,
    job_file: Path = _JOB_FILE,
    job_url: str = _JOB_URL,
    resume_text: str = _RESUME_TEXT,
    resume_file: Path = _RESUME_FILE,
    report: Path = typer.Option(None, "--report", "-o", help="Save report (.md, .html or .pdf)"),
    language: str = _LANG,
    verbose: bool = _VERBOSE,
) -> None:
    """Analyze the fit, then review an interview transcript against the gaps found."""
    _setup_logging(verbose)
    if not transcript.exists():
        console.print(f"[red]Transcript not found: {transcript}[/red]")
        raise typer.Exit(1)
    controller = _controller(language)
    _analyze_first(controller, job_text, job_file, job_url, resume_text, resume_file)
    result = _run(
        controller,
        ActionKind.ANALYZE_INTERVIEW,
        "Reviewing interview...",
        transcript.read_text(encoding="utf-8"),
    )
    _print_interview(result, controller.state.language)
    if report is not None:
        _write_report(report, controller)


@app.command()
def rewrite(
    job_text: str = _JOB_TEXT,
    job_file: Path = _JOB_FILE,
    job_url: str = _JOB_URL,
    resume_text: str = _RESUME_TEXT,
    resume_file: Path = _RESUME_FILE,
    output: Path = typer.Option(Path(REWRITTEN_RESUME_FILENAME), "--output", "-o", help="Rewritten resume path"),
    language: str = _LANG,
    verbose: bool = _VERBOSE,
) -> None:
    """Rewrite the resume for the job, then refine it in a chat loop (empty line to finish)."""
    _setup_logging(verbose)
    controller = _controller(language)
    _analyze_first(controller, job_text, job_file, job_url, resume_text, resume_file)
    result = _run(controller, ActionKind.REWRITE_RESUME, "Rewriting resume...")

    while True:
        console.print(Markdown(result.rewritten_resume))
        console.print(f"[cyan]AI:[/cyan] {result.chat_response}")
        message = typer.prompt("You", default="", show_default=False)
        if not message.strip():
            break
        result = _run(controller, ActionKind.SEND_CHAT_MESSAGE, "Refining...", message)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.rewritten_resume, encoding="utf-8")
    console.print(f"[green]Rewritten resume saved: {output}[/green]")


@settings_app.command("show")
def settings_show() -> None:
    """Show the saved provider, model and which keys are set."""
    config = load_config()
    store = SettingsStore(config.storage.resolved_state_path)
    llm = store.load_config()
    table = Table(title="Settings")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("provider", llm.provider.value)
    table.add_row("model", llm.model)
    table.add_row("theme", store.load_theme())
    for provider in LlmProvider:
        if provider is LlmProvider.GEMINI:
            continue
        table.add_row(f"{provider.value} key", "set" if llm.key_for(provider) else "[dim]not set[/dim]")
    console.print(table)


@settings_app.command("set")
def settings_set(
    provider: LlmProvider = typer.Option(None, "--provider", "-p", help="LLM provider"),
    model: str = typer.Option(None, "--model", "-m", help="Model id (see `hiresight models`)"),
    api_key: str = typer.Option(None, "--api-key", help="API key for the selected provider"),
    theme: str = typer.Option(None, "--theme", help="light or dark"),
) -> None:
    """Change the saved provider settings."""
    controller = _controller("en")
    llm = controller.state.config
    if provider is not None and provider is not llm.provider:
        llm = llm.with_provider(provider)
    if model is not None:
        llm = llm.model_copy(update={"model": model})
    if api_key is not None:
        try:
            llm = llm.with_api_key(llm.provider, api_key)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            raise typer.Exit(1)
    if theme is not None:
        try:
            controller.set_theme(theme)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            raise typer.Exit(1)

    controller.save_settings(llm)
    for note in controller.drain_notifications():
        color = "green" if note.level == "success" else "yellow"
        console.print(f"[{color}]{note.message}[/{color}]")


@app.command()
def models() -> None:
    """List the selectable models per provider."""
    table = Table(title="Models")
    table.add_column("Provider")
    table.add_column("Model id")
    table.add_column("Name")
    for provider, entries in AVAILABLE_MODELS.items():
        for model_id, name in entries:
            table.add_row(provider.value, model_id, name)
    console.print(table)


if __name__ == "__main__":
    app()
