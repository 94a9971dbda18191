"""Tests for the command line interface."""

import json
import logging

import pytest

from src.cli.commands.preview import PreviewWatcher
from src.cli.main import build_parser, main


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("EXTRACT_FRONTMATTER", "EXPORT_DIR", "EXPORT_HTML_TITLE", "READING_WORDS_PER_MINUTE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def markdown_file(tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("# Title\n\nHello **world**\n\n* a\n* b\n", encoding="utf-8")
    return path


class TestConvertCommand:
    """Test the convert subcommand."""

    def test_md_to_html_to_stdout(self, markdown_file, capsys):
        assert main(["convert", "md-to-html", str(markdown_file)]) == 0

        out = capsys.readouterr().out
        assert "<h1>Title</h1>" in out
        assert "<strong>world</strong>" in out
        assert "<li>a</li>" in out

    def test_md_to_json_to_file(self, markdown_file, tmp_path):
        output = tmp_path / "doc.json"

        assert main(["convert", "md-to-json", str(markdown_file), "-o", str(output)]) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["content"][0]["type"] == "heading"
        assert data["raw"] == markdown_file.read_text(encoding="utf-8")

    def test_frontmatter_flag(self, tmp_path, capsys):
        source = tmp_path / "fm.md"
        source.write_text("---\ntitle: Notes\n---\nBody\n", encoding="utf-8")

        assert main(["convert", "md-to-json", str(source), "--frontmatter"]) == 0

        assert json.loads(capsys.readouterr().out)["metadata"] == {"title": "Notes"}

    def test_invalid_json_exits_with_error(self, tmp_path, capsys):
        source = tmp_path / "bad.json"
        source.write_text("{not json", encoding="utf-8")

        assert main(["convert", "json-to-md", str(source)]) == 1
        assert capsys.readouterr().out == ""

    def test_unsupported_kind(self, markdown_file):
        assert main(["convert", "md-to-pdf", str(markdown_file)]) == 1

    def test_missing_input_file(self, tmp_path):
        assert main(["convert", "md-to-html", str(tmp_path / "missing.md")]) == 1


class TestStatsCommand:
    """Test the stats subcommand."""

    def test_json_output(self, markdown_file, capsys):
        assert main(["stats", str(markdown_file), "--json"]) == 0

        stats = json.loads(capsys.readouterr().out)
        assert stats["words"] == 8
        assert stats["paragraphs"] == 3
        assert stats["readingTimeMinutes"] == 1

    def test_text_output(self, markdown_file, capsys):
        assert main(["stats", str(markdown_file)]) == 0

        out = capsys.readouterr().out
        assert "Words: 8" in out
        assert "Reading time: 1 min" in out


class TestExportCommand:
    """Test the export subcommand."""

    def test_html_export(self, markdown_file, tmp_path):
        export_dir = tmp_path / "exports"

        assert main(["export", "html", str(markdown_file), "--export-dir", str(export_dir)]) == 0

        document = (export_dir / "document.html").read_text(encoding="utf-8")
        assert document.startswith("<!DOCTYPE html>")
        assert "<h1>Title</h1>" in document

    def test_custom_filename(self, markdown_file, tmp_path):
        assert main(["export", "txt", str(markdown_file), "--export-dir", str(tmp_path), "--filename", "notes.txt"]) == 0

        assert (tmp_path / "notes.txt").read_text(encoding="utf-8").startswith("# Title")

    def test_filename_outside_export_dir_is_rejected(self, markdown_file, tmp_path):
        assert main(["export", "md", str(markdown_file), "--export-dir", str(tmp_path), "--filename", "../x.md"]) == 1
        assert not (tmp_path.parent / "x.md").exists()

    def test_unknown_format_is_rejected_by_parser(self, markdown_file):
        with pytest.raises(SystemExit):
            main(["export", "pdf", str(markdown_file)])


class TestParser:
    """Test argument parsing."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_common_options(self):
        args = build_parser().parse_args(["stats", "-v", "--config", "custom.env"])

        assert args.verbose is True
        assert args.config == "custom.env"
        assert args.input is None


class TestPreviewWatcher:
    """Test debounced preview rendering on a manual clock."""

    def test_renders_once_after_quiet_period(self, tmp_path, manual_scheduler):
        source = tmp_path / "live.md"
        output = tmp_path / "live.html"
        watcher = PreviewWatcher(source, output, debounce_ms=300, scheduler=manual_scheduler)

        source.write_text("# One", encoding="utf-8")
        assert watcher.check() is True
        manual_scheduler.advance(0.1)
        source.write_text("# Two", encoding="utf-8")
        assert watcher.check() is True

        manual_scheduler.advance(0.2)
        assert watcher.render_count == 0

        manual_scheduler.advance(0.1)
        assert watcher.render_count == 1
        assert "<h1>Two</h1>" in output.read_text(encoding="utf-8")

    def test_unchanged_source_is_not_rerendered(self, tmp_path, manual_scheduler):
        source = tmp_path / "live.md"
        source.write_text("text", encoding="utf-8")
        watcher = PreviewWatcher(source, tmp_path / "live.html", scheduler=manual_scheduler)

        assert watcher.check() is True
        manual_scheduler.advance(1)
        assert watcher.check() is False
        manual_scheduler.advance(1)

        assert watcher.render_count == 1

    def test_stop_flushes_pending_render(self, tmp_path, manual_scheduler):
        source = tmp_path / "live.md"
        output = tmp_path / "live.html"
        source.write_text("*draft*", encoding="utf-8")
        watcher = PreviewWatcher(source, output, scheduler=manual_scheduler)

        watcher.check()
        watcher.stop()

        assert watcher.render_count == 1
        assert "<em>draft</em>" in output.read_text(encoding="utf-8")

    def test_missing_source_is_reported_not_raised(self, tmp_path, manual_scheduler):
        watcher = PreviewWatcher(tmp_path / "gone.md", tmp_path / "gone.html", scheduler=manual_scheduler)

        assert watcher.check() is False
        assert manual_scheduler.pending == 0
