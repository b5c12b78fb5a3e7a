"""Tests for the schedule PDF report generator."""

import re
from unittest.mock import MagicMock

import pytest

from generators.schedule_report_generator import (
    DEFAULT_TITLE,
    ELLIPSIS,
    ScheduleReportGenerator,
    fit_text,
)
from utils.data_models import ScheduleAssignment
from utils.exceptions import EmptySelectionError, ExportFailure

PAGE_PATTERN = re.compile(rb"/Type\s*/Page(?!s)")


def make_schedule(apartment_count: int, dates_each: int) -> ScheduleAssignment:
    return ScheduleAssignment(assignments={
        100 + i: [f"{j + 1} de junio de 2025" for j in range(dates_each)] for i in range(apartment_count)
    })


def drawn_text(fake_canvas, method: str) -> list:
    return [call.args[2] for call in getattr(fake_canvas, method).call_args_list]


class TestGenerateReport:
    """Tests writing real PDF files."""

    def test_writes_pdf(self, june_schedule, tmp_path) -> None:
        output = tmp_path / "escalas.pdf"

        result = ScheduleReportGenerator().generate_report(june_schedule, output_filename=str(output))

        assert output.exists()
        assert output.read_bytes().startswith(b"%PDF")
        assert result.page_count == 1
        assert result.path == str(output)
        assert [p.apartment_id for p in result.placements] == [301, 302, 201, 202]

    def test_creates_missing_directory(self, june_schedule, tmp_path) -> None:
        output = tmp_path / "nested" / "dir" / "escalas.pdf"
        ScheduleReportGenerator().generate_report(june_schedule, output_filename=str(output))
        assert output.exists()

    def test_paginates(self, tmp_path) -> None:
        output = tmp_path / "escalas.pdf"

        result = ScheduleReportGenerator().generate_report(make_schedule(5, 2), output_filename=str(output))

        assert result.page_count == 2
        assert len(PAGE_PATTERN.findall(output.read_bytes())) == 2

    def test_empty_schedule_raises(self, tmp_path) -> None:
        with pytest.raises(EmptySelectionError):
            ScheduleReportGenerator().generate_report(ScheduleAssignment(), output_filename=str(tmp_path / "x.pdf"))

    def test_none_schedule_raises(self, tmp_path) -> None:
        with pytest.raises(EmptySelectionError):
            ScheduleReportGenerator().generate_report(None, output_filename=str(tmp_path / "x.pdf"))

    def test_render_failure_becomes_export_failure(self, june_schedule, tmp_path, monkeypatch) -> None:
        def broken_save(self):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr("reportlab.pdfgen.canvas.Canvas.save", broken_save)

        with pytest.raises(ExportFailure) as exc_info:
            ScheduleReportGenerator().generate_report(june_schedule, output_filename=str(tmp_path / "x.pdf"))
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_output_parent_is_a_file(self, june_schedule, tmp_path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(ExportFailure):
            ScheduleReportGenerator().generate_report(june_schedule, output_filename=str(blocker / "x.pdf"))


class TestDrawing:
    """Tests the drawing calls against a recording canvas."""

    @pytest.fixture
    def fake_canvas(self, monkeypatch) -> MagicMock:
        fake = MagicMock()
        monkeypatch.setattr(ScheduleReportGenerator, "create_canvas", lambda self, *args, **kwargs: fake)
        return fake

    def test_title_and_headers(self, fake_canvas, june_schedule) -> None:
        ScheduleReportGenerator().generate_report(june_schedule, output_filename="unused.pdf")

        centred = drawn_text(fake_canvas, "drawCentredString")
        assert centred.count(DEFAULT_TITLE) == 1
        for apartment in (301, 302, 201, 202):
            assert f"APARTAMENTO {apartment}" in centred
        fake_canvas.save.assert_called_once()

    def test_dates_and_note(self, fake_canvas, june_schedule) -> None:
        ScheduleReportGenerator(note="Gracias").generate_report(june_schedule, output_filename="unused.pdf")

        strings = drawn_text(fake_canvas, "drawString")
        assert "1 de junio de 2025" in strings
        assert "29 de junio de 2025" in strings
        assert "Nota:" in strings
        assert "Gracias" in strings

    def test_title_redrawn_on_each_page(self, fake_canvas) -> None:
        ScheduleReportGenerator().generate_report(make_schedule(5, 20), output_filename="unused.pdf")

        assert fake_canvas.showPage.call_count == 2
        assert drawn_text(fake_canvas, "drawCentredString").count(DEFAULT_TITLE) == 3

    def test_truncated_table_gets_ellipsis(self, fake_canvas) -> None:
        ScheduleReportGenerator().generate_report(make_schedule(1, 25), output_filename="unused.pdf")

        assert ELLIPSIS in drawn_text(fake_canvas, "drawCentredString")
        assert len(drawn_text(fake_canvas, "drawString")) == 17 + 2

    def test_no_note(self, fake_canvas, june_schedule) -> None:
        ScheduleReportGenerator(note="").generate_report(june_schedule, output_filename="unused.pdf")
        assert "Nota:" not in drawn_text(fake_canvas, "drawString")


class TestFitText:
    """Tests for fit_text."""

    def test_short_text_unchanged(self) -> None:
        assert fit_text("1 de junio de 2025", "Helvetica", 9, 500) == "1 de junio de 2025"

    def test_long_text_is_shortened(self) -> None:
        result = fit_text("29 de septiembre de 2025", "Helvetica", 9, 40)

        assert result.endswith(ELLIPSIS)
        assert len(result) < len("29 de septiembre de 2025") + len(ELLIPSIS)
