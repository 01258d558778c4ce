"""Interactive CLI content editor."""
import logging
from pathlib import Path

from bs4 import BeautifulSoup
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from content_editor.boundary import Fallback, FaultBarrier
from content_editor.config import DB_PATH, LOG_LEVEL, REMOTE_TIMEOUT, REMOTE_URL
from content_editor.db import init_db, list_keys
from content_editor.editor import TABS, ContentEditor, Saved
from content_editor.importer import MalformedImportError, read_file_content
from content_editor.keys import KEY_PREFIX, STREAM_CLASS_LEVELS
from content_editor.remote import RemoteDocumentStore

console = Console()

LETTERS = ["a", "b", "c", "d"]


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def ask_number(label: str) -> int:
    """Ask for a 1-based position and return it 0-based."""
    return int(Prompt.ask(label)) - 1


def notes_preview(html: str | None) -> str:
    if not html:
        return "[dim]No notes yet[/dim]"
    return BeautifulSoup(html, "html.parser").get_text(" ", strip=True) or "[dim](markup only)[/dim]"


def show_welcome():
    console.print(Panel(
        "[bold]Chapter Content Editor[/bold]\n[dim]PDFs, videos, notes and MCQs[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("open", "Edit a chapter's content"),
        ("recent", "Chapters saved on this machine"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def show_header(editor: ContentEditor, title: str = "") -> None:
    tabs = "  ".join(
        f"[bold reverse blue] {t} [/bold reverse blue]" if t == editor.active_tab else f"[dim]{t}[/dim]"
        for t in TABS
    )
    console.print(Panel(
        f"[bold]Edit Content: {title or editor.chapter_id}[/bold]\n"
        f"[dim]{editor.subject_name} • Class {editor.class_level}[/dim]\n\n{tabs}",
        border_style="blue",
    ))


# --- tab rendering ---

def render_pdf_tab(editor: ContentEditor) -> None:
    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Free PDF Link", editor.config.free_link or "")
    table.add_row("Premium PDF Link", editor.config.premium_link or "")
    table.add_row("Ultra PDF Link", editor.config.ultra_pdf_link or "")
    table.add_row("Ultra Price (Credits)", str(editor.config.price if editor.config.price is not None else ""))
    console.print(table)


def render_video_tab(editor: ContentEditor) -> None:
    if not editor.video_playlist:
        console.print("[dim]Playlist is empty.[/dim]")
        return
    table = Table(title="Playlist")
    table.add_column("#", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("URL")
    for i, video in enumerate(editor.video_playlist, 1):
        table.add_row(str(i), video.title, video.url)
    console.print(table)


def render_notes_tab(editor: ContentEditor) -> None:
    console.print(Panel(notes_preview(editor.config.free_notes_html), title="Free Notes (HTML)"))
    console.print(Panel(
        notes_preview(editor.config.premium_notes_html), title="Premium Notes (HTML)", border_style="magenta",
    ))


def render_mcq_tab(editor: ContentEditor) -> None:
    console.print(f"[bold]{len(editor.mcqs)} Questions[/bold]\n")
    for i, q in enumerate(editor.mcqs, 1):
        console.print(f"[bold]Q{i}.[/bold] {q.question or '[dim]Question[/dim]'}")
        for o, opt in enumerate(q.options):
            marker = "[green]✓[/green]" if q.correct_answer == o else " "
            console.print(f"  {marker} [cyan]{LETTERS[o]})[/cyan] {opt}")
        if q.explanation:
            console.print(f"  [dim]{q.explanation}[/dim]")


RENDERERS = {
    "PDF": render_pdf_tab,
    "VIDEO": render_video_tab,
    "NOTES": render_notes_tab,
    "MCQ": render_mcq_tab,
}


# --- tab editing ---

def edit_pdf_tab(editor: ContentEditor) -> None:
    field = Prompt.ask("Field", choices=["free", "premium", "ultra", "price"])
    if field == "price":
        editor.set_price(int(Prompt.ask("Ultra price (credits)", default=str(editor.config.price or 0))))
        return
    setters = {
        "free": (editor.set_free_link, editor.config.free_link),
        "premium": (editor.set_premium_link, editor.config.premium_link),
        "ultra": (editor.set_ultra_pdf_link, editor.config.ultra_pdf_link),
    }
    setter, current = setters[field]
    setter(Prompt.ask("URL", default=current or "").strip())


def edit_video_tab(editor: ContentEditor) -> None:
    action = Prompt.ask("Playlist", choices=["add", "remove"])
    if action == "remove":
        editor.remove_video(ask_number("Video #"))
        return
    editor.video_title = Prompt.ask("Title").strip()
    editor.video_url = Prompt.ask("URL").strip()
    if not editor.add_video():
        console.print("[yellow]Title and URL are both required.[/yellow]")


def edit_notes_tab(editor: ContentEditor) -> None:
    which = Prompt.ask("Notes", choices=["free", "premium"])
    html = Prompt.ask("HTML (or @path to load a file)")
    if html.startswith("@"):
        html = read_file_content(html[1:])
    if which == "free":
        editor.set_free_notes(html)
    else:
        editor.set_premium_notes(html)


def read_pasted_rows() -> str:
    """Collect pasted spreadsheet rows until an empty line."""
    console.print("[dim]Paste rows (Q | A | B | C | D | Ans | Exp), then an empty line to finish.[/dim]")
    lines = []
    while True:
        line = Prompt.ask("", default="", show_default=False)
        if not line.strip():
            return "\n".join(lines)
        lines.append(line)


def import_questions(editor: ContentEditor) -> None:
    source = Prompt.ask("Import from", choices=["paste", "file"], default="paste")
    if source == "paste":
        text = read_pasted_rows()
    else:
        file_path = Prompt.ask("TSV file (Q | A | B | C | D | Ans | Exp)")
        if not Path(file_path).is_file():
            console.print(f"[red]File not found: {file_path}[/red]")
            return
        text = read_file_content(file_path)
    try:
        result = editor.import_mcqs(text)
    except MalformedImportError as e:
        console.print(f"[red]{e}[/red]")
        return
    msg = f"[green]Imported {result['imported']} Questions[/green]"
    if result["skipped"]:
        msg += f" [yellow]({result['skipped']} rows skipped)[/yellow]"
    console.print(msg)


def edit_mcq_tab(editor: ContentEditor) -> None:
    action = Prompt.ask(
        "MCQ", choices=["import", "add", "delete", "question", "option", "answer", "explanation"],
    )
    if action == "import":
        import_questions(editor)
    elif action == "add":
        editor.add_mcq()
        console.print(f"[green]Added Q{len(editor.mcqs)}[/green]")
    elif action == "delete":
        editor.delete_mcq(ask_number("Question #"))
    elif action == "question":
        idx = ask_number("Question #")
        editor.set_question(idx, Prompt.ask("Question"))
    elif action == "option":
        idx = ask_number("Question #")
        letter = Prompt.ask("Option", choices=LETTERS)
        editor.update_mcq_option(idx, LETTERS.index(letter), Prompt.ask("Text"))
    elif action == "answer":
        idx = ask_number("Question #")
        editor.set_correct_answer(idx, LETTERS.index(Prompt.ask("Correct option", choices=LETTERS)))
    else:
        idx = ask_number("Question #")
        editor.set_explanation(idx, Prompt.ask("Explanation", default=""))


EDITORS = {
    "PDF": edit_pdf_tab,
    "VIDEO": edit_video_tab,
    "NOTES": edit_notes_tab,
    "MCQ": edit_mcq_tab,
}


def show_fallback(fallback: Fallback) -> None:
    console.print(Panel(
        f"[bold]{fallback.title}[/bold]\n[dim]{fallback.detail}[/dim]\n\n[red]{fallback.message}[/red]",
        border_style="red",
    ))


def show_save_result(result) -> None:
    if isinstance(result, Saved):
        console.print("[green]✅ Content Saved![/green]")
    else:
        console.print(f"[yellow]Saved on this machine, but the cloud copy was not updated: {result.reason}[/yellow]")


def run_editor(editor: ContentEditor, title: str = "") -> None:
    """Tabbed editing loop. Rendering goes through a fault barrier."""
    barrier = FaultBarrier(on_reset=lambda: editor.select_tab("PDF"))
    choices = [t.lower() for t in TABS] + ["edit", "save", "close"]
    while True:
        show_header(editor, title)
        rendered = barrier.render(RENDERERS[editor.active_tab], editor)
        if isinstance(rendered, Fallback):
            show_fallback(rendered)
            if Prompt.ask("Recover", choices=["back", "reload"], default="back") == "reload":
                barrier.reload()
                return
            barrier.reset()
            continue
        choice = Prompt.ask("\n[bold]>[/bold]", choices=choices, default="edit")
        if choice == "close":
            editor.close()
            return
        if choice == "save":
            show_save_result(editor.save())
        elif choice == "edit":
            try:
                EDITORS[editor.active_tab](editor)
            except (IndexError, ValueError, OSError) as e:
                console.print(f"[red]{e}[/red]")
        else:
            editor.select_tab(choice)


def cmd_open(db_path: str, remote: RemoteDocumentStore | None) -> None:
    board = Prompt.ask("Board", default="CBSE")
    class_level = Prompt.ask("Class", default="10")
    stream = None
    if class_level in STREAM_CLASS_LEVELS:
        stream = Prompt.ask("Stream (blank for none)", default="") or None
    subject = Prompt.ask("Subject")
    chapter_id = Prompt.ask("Chapter id")
    title = Prompt.ask("Chapter title", default="")
    editor = ContentEditor(db_path, remote, board, class_level, stream, subject, chapter_id)
    with console.status("Loading Editor..."):
        editor.load()
    run_editor(editor, title)


def cmd_recent(db_path: str) -> None:
    keys = list_keys(db_path, KEY_PREFIX)
    if not keys:
        console.print("[yellow]Nothing saved on this machine yet.[/yellow]")
        return
    table = Table(title="Saved Chapters")
    table.add_column("Key", style="cyan")
    for key in keys:
        table.add_row(key[len(KEY_PREFIX):])
    console.print(table)


def main():
    configure_logging()
    db_path = DB_PATH
    init_db(db_path)
    remote = RemoteDocumentStore(REMOTE_URL, REMOTE_TIMEOUT) if REMOTE_URL else None
    if remote is None:
        console.print("[dim]No remote store configured, saving locally only.[/dim]")

    show_welcome()

    try:
        while True:
            show_menu()
            choice = Prompt.ask("\n[bold]>[/bold]", default="open").strip().lower()
            try:
                if choice == "open":
                    cmd_open(db_path, remote)
                elif choice == "recent":
                    cmd_recent(db_path)
                elif choice in ("quit", "exit", "q"):
                    break
                else:
                    console.print("[red]Unknown command. Try again.[/red]")
            except KeyboardInterrupt:
                console.print("\n[dim]Use 'quit' to exit.[/dim]")
            except Exception as e:
                console.print(f"[red]Error: {e}[/red]")
    finally:
        if remote is not None:
            remote.close()


if __name__ == "__main__":
    main()
