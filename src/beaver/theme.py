"""Console theming and shared rendering helpers for Beaver."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.theme import Theme

from .todo import Todo, Priority
from .utils.datetime import to_local


CITY_LIGHTS_COLORS = {
    'primary': '#68D5F3',
    'accent': '#B7C5D3',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'error': '#F78C6C',
    'text_muted': '#718CA1',
    'text_bright': '#FFFFFF',
}

BEAVER_THEME = Theme({
    'muted': CITY_LIGHTS_COLORS['text_muted'],
    'bright': f"{CITY_LIGHTS_COLORS['text_bright']} bold",
    'primary': CITY_LIGHTS_COLORS['primary'],
    'accent': CITY_LIGHTS_COLORS['accent'],
    'success': f"{CITY_LIGHTS_COLORS['success']} bold",
    'warning': f"{CITY_LIGHTS_COLORS['warning']} bold",
    'error': f"{CITY_LIGHTS_COLORS['error']} bold",
    'header': f"{CITY_LIGHTS_COLORS['primary']} bold underline",
    'priority_high': 'bold',
    'priority_medium': 'none',
    'priority_low': 'none',
})


def get_themed_console(no_color: bool = False, **kwargs) -> Console:
    """Get a console instance with the Beaver theme applied."""
    return Console(theme=BEAVER_THEME, no_color=no_color, **kwargs)


def get_priority_style(priority: Priority) -> str:
    """Get the style name for a priority level."""
    return f"priority_{priority.value.lower()}"


def format_local_time(todo_time, date_format: str) -> str:
    return to_local(todo_time).strftime(date_format)


def print_todo_details(console: Console, todo: Todo, date_format: str) -> None:
    """Print the detail view used by ``fetch`` and ``next``."""
    console.print(f"Title: [bright]{escape(todo.title)}[/bright]", highlight=False)
    console.print(f"ID: {todo.id}", highlight=False)
    console.print(f"Priority: [{get_priority_style(todo.priority)}]{todo.priority}[/]", highlight=False)
    console.print(f"Created on: {format_local_time(todo.created_at_utc, date_format)}", highlight=False)
    if todo.completed:
        console.print(
            f"Completed on: {format_local_time(todo.completed_at_utc, date_format)}",
            highlight=False,
        )


def print_empty_list(console: Console) -> None:
    console.print("[muted]Your todo list is empty! :)[/muted]")


def show_quick_help(console: Console, prog_name: Optional[str] = None) -> None:
    """Show quick help with themed styling."""
    prog = prog_name or "beaver"
    help_text = f"""[header]Quick Start:[/header]
  [primary]{prog} add[/primary] [muted]Buy milk -p=H[/muted]              Add a todo (priority H, M or L)
  [primary]{prog} list[/primary] [muted]--sort=CreationTime --all[/muted] List todos
  [primary]{prog} next[/primary]                           Show the next todo to work on
  [primary]{prog} done[/primary] [muted]<id>[/muted]                      Complete a todo
  [primary]{prog} edit[/primary] [muted]<id> -t=New title -p=M[/muted]    Edit a todo
  [primary]{prog} fetch[/primary] [muted]<id>[/muted]                     Show one todo
  [primary]{prog} remove[/primary] [muted]<id>[/muted]                    Delete an active todo
  [primary]{prog} purge[/primary]                          Delete every completed todo
  [primary]{prog} --help[/primary]                         Full help
"""

    console.print(Panel(
        help_text,
        title="[accent]Getting Started[/accent]",
        padding=(1, 1)
    ))
