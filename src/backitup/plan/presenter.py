# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from datetime import datetime

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backitup.jobs.exclude import expand_patterns
from backitup.core.common import get_panel_width
from backitup.core.config import CFG
from backitup.jobs.job import BackupJob


class PlanPresenter:
    """
    Presents the backup jobs that would be run, without running them.
    """

    def __init__(
        self, jobs: tuple[BackupJob, ...], timestamp: datetime, date_only: bool
    ):
        """
        Initialize the presenter.

        Args:
            jobs (tuple[BackupJob, ...]): The jobs to present.
            timestamp (datetime): Time used to construct the archive names.
            date_only (bool): Whether the archive names contain only the date.
        """
        self._jobs = jobs
        self._timestamp = timestamp
        self._date_only = date_only

    def createPlanPanel(
        self, console: Console | None = None, expanded: bool = False
    ) -> Group:
        """
        Create a Rich panel listing the jobs.

        Args:
            console (Console | None): Optional Rich Console instance.
                If None, a new Console will be created.
            expanded (bool): Show the expanded form of the exclude patterns.

        Returns:
            Group: Rich Group containing the plan table.
        """
        console = console or Console()

        panel = Panel(
            self._createPlanTable(expanded),
            title=Text(
                f"BACKUP PLAN ({len(self._jobs)} JOB{'S' if len(self._jobs) != 1 else ''})",
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

    def _createPlanTable(self, expanded: bool) -> Table:
        """
        Construct a table with one row per job.
        """
        table = Table(show_header=True, box=None, padding=(0, 1))

        for header in ("Source", "Archive", "Output Directory", "Excludes"):
            table.add_column(
                header=Text(header, justify="center", style=CFG.presenter.headers_style),
                justify="left",
            )

        for job in self._jobs:
            patterns = (
                expand_patterns(job.exclude_patterns)
                if expanded
                else list(job.exclude_patterns)
            )
            table.add_row(
                Text(str(job.source_path), style=CFG.presenter.main_style),
                Text(
                    job.archiveName(self._timestamp, self._date_only),
                    style=CFG.presenter.main_style,
                ),
                Text(str(job.output_dir), style=CFG.presenter.secondary_style),
                Text(", ".join(patterns) or "-", style=CFG.presenter.secondary_style),
            )

        return table
