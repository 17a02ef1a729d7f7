"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from reminder_reviser.analytics import get_analytics
from reminder_reviser.catalog import DEFAULT_TONE, SAMPLES, TONES, get_sample
from reminder_reviser.clients.gemini_client import GeminiClient
from reminder_reviser.config import get_api_secret, get_measurement_id, load_config
from reminder_reviser.pipeline.controller import RevisionController

app = typer.Typer(
    name="reminder-reviser",
    help="催促・リマインド文面のAI添削ツール",
    no_args_is_help=True,
)
console = Console()


def _build_controller() -> RevisionController:
    config = load_config()
    analytics = get_analytics()
    if not analytics.enabled:
        analytics.initialize(
            get_measurement_id(),
            api_secret=get_api_secret(),
            config=config.analytics,
        )
    client = GeminiClient(
        model=config.gemini.model,
        base_url=config.gemini.base_url,
        timeout=config.gemini.timeout,
    )
    return RevisionController(client, analytics=analytics)


@app.command()
def revise(
    text: str = typer.Argument(None, help="添削する文面"),
    tone: str = typer.Option(DEFAULT_TONE, "--tone", "-t", help="soft / standard / firm"),
    file: Path = typer.Option(None, "--file", "-f", help="文面を読み込むテキストファイル"),
    sample: str = typer.Option(None, "--sample", "-s", help="サンプル文面のラベル (例: 支払い)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="詳細ログを出力"),
) -> None:
    """文面をAIで添削し、添削後の文面と改善ポイントを表示します。"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    controller = _build_controller()

    try:
        controller.select_tone(tone)
    except KeyError as e:
        console.print(f"[red]{e.args[0]}[/red]")
        raise typer.Exit(1)

    if sample:
        try:
            controller.load_sample(get_sample(sample))
        except KeyError as e:
            console.print(f"[red]{e.args[0]}[/red]")
            raise typer.Exit(1)
    elif file is not None:
        if not file.exists():
            console.print(f"[red]ファイルが見つかりません: {file}[/red]")
            raise typer.Exit(1)
        controller.set_input_text(file.read_text(encoding="utf-8"))
    elif text is not None:
        controller.set_input_text(text)

    with console.status("添削しています..."):
        asyncio.run(controller.submit_revision())

    state = controller.state
    if state.error_message:
        console.print(f"[red]{state.error_message}[/red]")
        raise typer.Exit(1)

    console.print(Panel(state.revised_text, title="添削後の文面", border_style="green"))
    if state.feedback_text:
        console.print(Panel(Markdown(state.feedback_text), title="改善ポイント", border_style="yellow"))


@app.command()
def tones() -> None:
    """利用できるトーンの一覧を表示します。"""
    table = Table(title="トーン")
    table.add_column("key")
    table.add_column("ラベル")
    table.add_column("説明")
    for t in TONES:
        table.add_row(t.key, f"{t.emoji} {t.label}", t.description)
    console.print(table)


@app.command()
def samples() -> None:
    """サンプル文面の一覧を表示します。"""
    table = Table(title="サンプル文面")
    table.add_column("ラベル")
    table.add_column("文面")
    for s in SAMPLES:
        table.add_row(s.label, s.text)
    console.print(table)


if __name__ == "__main__":
    app()
