"""Tests for the ExportEntriesUseCase."""

from unittest.mock import MagicMock

from ledger.application.use_cases.export_entries import ExportEntriesUseCase


def _build(repository):
    writer = MagicMock(return_value=3)
    use_case = ExportEntriesUseCase(
        repository,
        logger=MagicMock(),
        writer=writer,
    )
    return use_case, writer


def test_execute_exports_every_entry_by_default(tmp_path) -> None:
    repository = MagicMock()
    repository.list_entries.return_value = ["a", "b", "c"]
    use_case, writer = _build(repository)

    count = use_case.execute(tmp_path / "all.csv")

    assert count == 3
    writer.assert_called_once_with(tmp_path / "all.csv", ["a", "b", "c"])


def test_execute_exports_single_month_or_range(tmp_path) -> None:
    repository = MagicMock()
    repository.entries_in_month.return_value = ["feb"]
    repository.entries_in_range.return_value = ["jan", "feb"]
    use_case, writer = _build(repository)

    use_case.execute(tmp_path / "feb.csv", start_month="2024-02")
    use_case.execute(
        tmp_path / "q1.csv",
        start_month="2024-01",
        end_month="2024-03",
    )

    repository.entries_in_month.assert_called_once_with("2024-02")
    repository.entries_in_range.assert_called_once_with("2024-01", "2024-03")
    assert writer.call_args_list[0].args == (tmp_path / "feb.csv", ["feb"])
    assert writer.call_args_list[1].args == (
        tmp_path / "q1.csv",
        ["jan", "feb"],
    )
