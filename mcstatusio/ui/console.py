"""
Rich console rendering of server status
"""

import logging
from datetime import datetime, timezone
from typing import List, Dict

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.markup import escape
from rich.text import Text

from ..core.config_types import UIConfig
from ..parsers.status_parser import StatusSummary

logger = logging.getLogger(__name__)

class StatusConsole:
    """Render status summaries with rich"""
    
    def __init__(self, config: UIConfig = None, console: Console = None):
        self.config = config or UIConfig()
        self.console = console or Console()
    
    def _format_timestamp(self, millis: int) -> str:
        if not millis:
            return "-"
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).strftime('%Y-%m-%d %H:%M:%S UTC')
    
    def _create_overview_table(self, summary: StatusSummary) -> Table:
        """Key/value table for the main fields"""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Value", style="white")
        
        state = Text("online", style="bold green") if summary.online else Text("offline", style="bold red")
        table.add_row("Status", state)
        table.add_row("Address", Text(f"{summary.host}:{summary.port}"))
        table.add_row("IP", Text(summary.ip_address or "-"))
        if summary.eula_blocked:
            table.add_row("EULA", Text("blocked", style="bold yellow"))
        
        if summary.online:
            table.add_row("Version", Text(f"{summary.version or '-'} (protocol {summary.protocol})"))
            table.add_row("Players", f"{summary.players_online}/{summary.players_max}")
            table.add_row("MOTD", Text(summary.motd or ""))
            if summary.software:
                table.add_row("Software", Text(summary.software))
            if summary.gamemode:
                table.add_row("Gamemode", Text(summary.gamemode))
        
        table.add_row("Retrieved", self._format_timestamp(summary.retrieved_at))
        table.add_row("Expires", self._format_timestamp(summary.expires_at))
        return table
    
    def _create_list_table(self, title: str, names: List[str]) -> Table:
        table = Table(title=title, show_header=False, title_justify="left")
        table.add_column(title)
        limit = self.config.max_list_items
        for name in names[:limit]:
            table.add_row(Text(name))
        if len(names) > limit:
            table.add_row(Text(f"... and {len(names) - limit} more", style="dim"))
        return table
    
    def _create_version_table(self, title: str, entries: Dict[str, str]) -> Table:
        table = Table(title=title, title_justify="left")
        table.add_column("Name", style="cyan")
        table.add_column("Version", style="magenta")
        limit = self.config.max_list_items
        for name, version in list(entries.items())[:limit]:
            table.add_row(Text(name), Text(version))
        if len(entries) > limit:
            table.add_row(Text(f"... and {len(entries) - limit} more", style="dim"), "")
        return table
    
    def build(self, summary: StatusSummary) -> Panel:
        """Build the renderable for one summary"""
        parts = [self._create_overview_table(summary)]
        
        if self.config.show_players and summary.players:
            parts.append(self._create_list_table("Players", summary.players))
        if self.config.show_plugins and summary.plugins:
            parts.append(self._create_version_table("Plugins", summary.plugins))
        if self.config.show_mods and summary.mods:
            parts.append(self._create_version_table("Mods", summary.mods))
        
        title = f"{summary.edition.capitalize()} server {escape(summary.host)}"
        return Panel(Group(*parts), title=title, border_style="green" if summary.online else "red")
    
    def show(self, summary: StatusSummary) -> None:
        self.console.print(self.build(summary))
    
    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")
