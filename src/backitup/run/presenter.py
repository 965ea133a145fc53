# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backitup.core.common import get_panel_width
from backitup.core.config import CFG
from backitup.jobs.job import ArchiveResult, count_failed, total_size


class ResultsPresenter:
    """
    Presents the outcome of a backup run.
    """

    def __init__(self, results: list[ArchiveResult]):
        """
        Initialize the presenter with the results of the run.

        Args:
            results (list[ArchiveResult]): Results of all processed jobs, in order.
        """
        self._results = results

    def createResultsPanel(self, console: Console | None = None) -> Group:
        """
        Create a Rich panel summarizing the results of all jobs.

        Args:
            console (Console | None): Optional Rich Console instance.
                If None, a new Console will be created.

        Returns:
            Group: Rich Group containing the results table and the summary line.
        """
        console = console or Console()

        panel = Panel(
            Group(self._createResultsTable(), Text(""), self._createSummary()),
            title=Text(
                "BACKUP RESULTS",
                style=CFG.presenter.title_style,
                justify="center",
            ),
            border_style=CFG.presenter.border_style,
            padding=(1, 1),
            width=get_panel_width(
                console,
                1,
                CFG.presenter.min_width,
                CFG.presenter.max_width,
            ),
            expand=False,
        )

        return Group(Text(""), panel, Text(""))

    def _createResultsTable(self) -> Table:
        """
        Construct a table with one row per job.
        """
        table = Table(show_header=True, box=None, padding=(0, 1))

        table.add_column(justify="left")
        for header, justify in (
            ("Source", "left"),
            ("Archive", "left"),
            ("Size / Error", "left"),
        ):
            table.add_column(
                header=Text(header, justify="center", style=CFG.presenter.headers_style),
                justify=justify,
            )

        for result in self._results:
            if result.success:
                mark = Text(CFG.presenter.success_mark, style=CFG.presenter.success_style)
                detail = Text(str(result.size), style=CFG.presenter.main_style)
            else:
                mark = Text(CFG.presenter.failure_mark, style=CFG.presenter.failure_style)
                detail = Text(
                    f"{result.error_kind}: {result.error_message}",
                    style=CFG.presenter.failure_style,
                )

            table.add_row(
                mark,
                Text(str(result.job.source_path), style=CFG.presenter.main_style),
                Text(
                    result.output_file.name if result.success else "-",
                    style=CFG.presenter.secondary_style,
                ),
                detail,
            )

        return table

    def _createSummary(self) -> Text:
        """
        Construct the line with the numbers of succeeded and failed jobs.
        """
        failed = count_failed(self._results)
        succeeded = len(self._results) - failed

        summary = Text(
            f"{succeeded} succeeded", style=CFG.presenter.success_style
        ) + Text(", ", style=CFG.presenter.main_style)
        summary += Text(
            f"{failed} failed",
            style=CFG.presenter.failure_style if failed else CFG.presenter.main_style,
        )
        summary += Text(
            f"  ({total_size(self._results)} written)",
            style=CFG.presenter.secondary_style,
        )

        return summary
