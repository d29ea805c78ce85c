from __future__ import annotations

from rich import box
from rich.console import Console, Group
from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import Config, DrawBox, Layout
from .utils import displayStr


class RichReport:
    def __init__(self, *, source: str = "", console: Console | None = None) -> None:
        self.source = source
        self.console = console or Console()

        self.styleHeader = "bold black on magenta"
        self.styleTableHeader = "bold magenta"
        self.styleInherited = "dim"
        self.styleCategory = "bold cyan"

    def renderHeader(self, cfg: Config) -> Text:
        width = self.console.size.width

        left = f"  SLANT  {displayStr(self.source)}" if self.source else "  SLANT"
        right = f"waittime {cfg.waittime}s  "

        fill = max(1, width - len(left) - len(right))
        return Text(left + (" " * fill) + right, style=self.styleHeader)

    def renderHostsTable(self, cfg: Config) -> Table:
        tableObj = Table(
            expand=True,
            show_header=True,
            header_style=self.styleTableHeader,
            show_lines=False,
            pad_edge=False,
            box=box.SQUARE,
        )

        tableObj.add_column("#", ratio=1, justify="right", no_wrap=True)
        tableObj.add_column("HOST", ratio=6, no_wrap=True, overflow="ellipsis")
        tableObj.add_column("WAITTIME", ratio=2, justify="right", no_wrap=True)

        if not cfg.hosts:
            tableObj.add_row("-", "-", "-")
            return tableObj

        for hostIdx, hostEntry in enumerate(cfg.hosts):
            if hostEntry.waittime:
                waitText = Text(f"{hostEntry.waittime}s")
            else:
                waitText = Text(f"{cfg.waittime}s", style=self.styleInherited)
            tableObj.add_row(str(hostIdx + 1), Text(displayStr(hostEntry.url)), waitText)

        return tableObj

    def formatBox(self, boxObj: DrawBox) -> Text:
        outText = Text(boxObj.category.value, style=self.styleCategory)
        names = boxObj.optionNames()
        if names:
            outText.append("  " + " ".join(names))
        return outText

    def renderLayoutPanel(self, layout: Layout | None) -> Panel:
        if layout is None:
            return Panel(Text("(default)", style="dim"), title="LAYOUT", box=box.SQUARE)

        outText = Text()
        outText.append(f"header  {'yes' if layout.header else 'no'}\n")
        outText.append(f"errlog  {layout.errlog}\n")
        for idx, boxObj in enumerate(layout.boxes):
            outText.append(f"\n{idx + 1:>3}  ")
            outText.append_text(self.formatBox(boxObj))

        return Panel(Padding(outText, (0, 1)), title="LAYOUT", box=box.SQUARE)

    def render(self, cfg: Config) -> Group:
        return Group(
            self.renderHeader(cfg),
            self.renderHostsTable(cfg),
            self.renderLayoutPanel(cfg.layout),
        )

    def print(self, cfg: Config) -> None:
        self.console.print(self.render(cfg))
