import argparse
import sys
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from transcript_pro.config import settings
from transcript_pro.core.errors import ResolutionError
from transcript_pro.core.video import extract_video_id, watch_url
from transcript_pro.providers.youtube import TranscriptResolver
from transcript_pro.services import viewer
from transcript_pro.utils.logger import logger

console = Console()

THEMES = {
    "dark": {"time": "cyan", "text": "white", "active": "bold black on magenta", "match": "bold magenta", "border": "magenta"},
    "light": {"time": "blue", "text": "black", "active": "bold white on blue", "match": "bold red", "border": "blue"},
}

def render_transcript(transcript, shown, query=None, position=None):
    theme = THEMES[settings.THEME]
    url = watch_url(transcript.video_id, position)
    console.print(Panel(
        f"[bold]{transcript.video_id}[/bold]  {url}\n"
        f"[italic]{len(transcript.segments)} segments · {transcript.language} · via {transcript.source}[/italic]",
        title="Transcript",
        border_style=theme["border"]
    ))

    if not shown:
        console.print("[dim]No transcript available. Try a different language or video.[/dim]")
        return

    active = viewer.active_index(shown, position)
    table = Table(show_header=True, header_style="bold", border_style=theme["border"])
    table.add_column("Time", style=theme["time"], width=8)
    table.add_column("Text", style=theme["text"])
    for i, seg in enumerate(shown):
        table.add_row(
            viewer.format_time(seg.start),
            viewer.highlight(seg.text, query, theme["match"]),
            style=theme["active"] if i == active else None
        )
    console.print(table)

    if query:
        console.print(f"[dim]{len(shown)} of {len(transcript.segments)} segments match '{escape(query)}'[/dim]")

def main(argv=None):
    parser = argparse.ArgumentParser(description="YouTube transcript viewer")
    parser.add_argument("url", help="YouTube URL or 11-character video ID")
    parser.add_argument("--lang", help="Preferred transcript language", default=settings.DEFAULT_LANG)
    parser.add_argument("--search", help="Only show segments containing this text")
    parser.add_argument("--at", type=float, help="Highlight the segment playing at this many seconds")
    parser.add_argument("--copy", action="store_true", help="Print the transcript as a single line of plain text")
    parser.add_argument("--save", action="store_true", help="Save the transcript to the output directory")
    parser.add_argument("--format", choices=["txt", "json"], default="txt", help="Export format for --save")
    parser.add_argument("--output-dir", help="Directory for --save", default=settings.OUTPUT_DIR)
    parser.add_argument("--verbose", action="store_true", help="Show per-source failures")

    args = parser.parse_args(argv)

    video_id = extract_video_id(args.url.strip().strip('`').strip('"').strip("'"))
    if not video_id:
        console.print("[red]Please enter a valid YouTube URL[/red]")
        return 2

    resolver = TranscriptResolver()
    try:
        with console.status("Fetching transcript...", spinner="dots"):
            transcript = resolver.fetch(video_id, args.lang)
    except ResolutionError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if args.verbose:
            for failure in e.failures:
                console.print(f"  [dim]- {escape(failure)}[/dim]")
        return 1

    if args.copy:
        console.print(viewer.to_clipboard_text(transcript.segments), soft_wrap=True, markup=False, highlight=False)
    else:
        shown = viewer.filter_segments(transcript.segments, args.search)
        render_transcript(transcript, shown, args.search, args.at)

    if args.save:
        try:
            path = viewer.save_transcript(transcript, args.output_dir, args.format)
        except OSError as e:
            logger.error(f"Failed to save transcript: {e}")
            return 1
        console.print(f"\n[blue]Saved transcript to {escape(path)}[/blue]")
    return 0

if __name__ == "__main__":
    sys.exit(main())
