# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import dataclasses
from datetime import datetime
from pathlib import Path

import pytest

from backitup.core.error import ArchiveFailedError, BackitupError
from backitup.jobs.job import ArchiveResult, BackupJob, count_failed, total_size
from backitup.properties.error_kind import ErrorKind
from backitup.properties.size import Size

TIMESTAMP = datetime(2024, 5, 22, 14, 3, 9)


def _job(source="/home/user/Public/myproject_a", output="/offline/backups"):
    return BackupJob(Path(source), Path(output), ("venv", ".git"))


def test_backup_job_properties():
    job = _job()

    assert job.name == "myproject_a"
    assert job.parent == Path("/home/user/Public")
    assert job.exclude_patterns == ("venv", ".git")


def test_backup_job_normalizes_plain_values():
    job = BackupJob("/srv/project", "/backups", ["node_modules"])

    assert job.source_path == Path("/srv/project")
    assert job.output_dir == Path("/backups")
    assert job.exclude_patterns == ("node_modules",)


def test_backup_job_is_immutable():
    job = _job()

    with pytest.raises(dataclasses.FrozenInstanceError):
        job.source_path = Path("/other")  # ty: ignore[invalid-assignment]


@pytest.mark.parametrize(
    "source, output",
    [
        ("relative/project", "/backups"),
        ("/srv/project", "backups"),
    ],
)
def test_backup_job_rejects_relative_paths(source, output):
    with pytest.raises(BackitupError, match="not an absolute path"):
        BackupJob(Path(source), Path(output))


def test_backup_job_rejects_root():
    with pytest.raises(BackitupError, match="no base name"):
        BackupJob(Path("/"), Path("/backups"))


@pytest.mark.parametrize("pattern", ["", "  ", "/"])
def test_backup_job_rejects_invalid_pattern(pattern):
    with pytest.raises(BackitupError, match="Invalid exclude pattern"):
        BackupJob(Path("/srv/project"), Path("/backups"), ("venv", pattern))


def test_backup_job_collapses_dot_segments():
    job = BackupJob(Path("/srv/project/sub/.."), Path("/backups/./daily"))

    assert job.source_path == Path("/srv/project")
    assert job.output_dir == Path("/backups/daily")
    assert job.name == "project"
    assert job.parent == Path("/srv")
    assert job.archiveName(TIMESTAMP, True) == "project_2024-05-22.tgz"


def test_backup_job_dot_segments_up_to_root_are_rejected():
    with pytest.raises(BackitupError, match="no base name"):
        BackupJob(Path("/srv/.."), Path("/backups"))


def test_archive_name_with_time():
    assert _job().archiveName(TIMESTAMP) == "myproject_a_2024-05-22_14-03-09.tgz"


def test_archive_name_date_only():
    assert _job().archiveName(TIMESTAMP, date_only=True) == "myproject_a_2024-05-22.tgz"


def test_archive_name_keeps_spaces():
    job = _job(source="/srv/project two")
    assert job.archiveName(TIMESTAMP, True) == "project two_2024-05-22.tgz"


def test_archive_path_is_in_output_dir():
    assert _job().archivePath(TIMESTAMP) == Path(
        "/offline/backups/myproject_a_2024-05-22_14-03-09.tgz"
    )


def test_archive_result_succeeded():
    job = _job()
    result = ArchiveResult.succeeded(job, Path("/offline/backups/a.tgz"), 2048)

    assert result.success
    assert result.size_bytes == 2048
    assert result.size == Size(2, "kb")
    assert result.error_kind is None
    assert result.error_message is None


def test_archive_result_failed():
    job = _job()
    result = ArchiveResult.failed(
        job, Path("/offline/backups/a.tgz"), ArchiveFailedError("disk full")
    )

    assert not result.success
    assert result.size_bytes is None
    assert result.size is None
    assert result.error_kind == ErrorKind.ARCHIVE_FAILED
    assert result.error_message == "disk full"


def test_count_failed_and_total_size():
    job = _job()
    results = [
        ArchiveResult.succeeded(job, Path("/b/a.tgz"), 1024),
        ArchiveResult.failed(job, Path("/b/b.tgz"), ArchiveFailedError("x")),
        ArchiveResult.succeeded(job, Path("/b/c.tgz"), 3072),
    ]

    assert count_failed(results) == 1
    assert total_size(results) == Size(4, "kb")


def test_total_size_of_no_results_is_zero():
    assert total_size([]) == Size(0)
