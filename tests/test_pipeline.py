"""tests for the end-to-end preview pipeline."""

import io
from pathlib import Path
from unittest.mock import patch

import pytest

from mdpreview.converters import MarkdownItConverter
from mdpreview.core.errors import InputError, OutputError, PreviewError, RenderError
from mdpreview.pipeline import parse_content, run


def _write_source(tmp_path: Path, text: str = "# Hello\n\n- a\n- b\n") -> Path:
    source = tmp_path / "post.md"
    source.write_text(text, encoding="utf-8")
    return source


def test_parse_content_default_template() -> None:
    """renders heading and list into the default page."""
    html = parse_content(b"# Hello\n\n- a\n- b\n").decode("utf-8")

    assert "<h1>Hello</h1>" in html
    assert "<ul>\n<li>a</li>\n<li>b</li>\n</ul>" in html
    assert html.startswith("<!DOCTYPE html>")


def test_parse_content_is_deterministic() -> None:
    """identical input gives identical bytes."""
    markdown = "# T\n\ntext\n```\ncode\n```\n"
    assert parse_content(markdown) == parse_content(markdown)


def test_parse_content_sanitizes_body() -> None:
    """raw HTML from the converter never reaches the page unsanitized."""
    html = parse_content('<script>alert(1)</script>\n<a onclick="doEvil()">x</a>\n')
    assert b"<script" not in html
    assert b"onclick" not in html


def test_parse_content_with_markdown_it() -> None:
    """alternate converter is honoured."""
    html = parse_content("**bold**", converter=MarkdownItConverter())
    assert b"<strong>bold</strong>" in html


def test_parse_content_missing_template(tmp_path: Path) -> None:
    """missing custom template is fatal."""
    with pytest.raises(RenderError):
        parse_content("# x", template_file=tmp_path / "missing.html")


def test_run_writes_index_and_prints_path(tmp_path: Path) -> None:
    """writes index.html next to the source and reports its path."""
    source = _write_source(tmp_path)
    out = io.StringIO()

    with patch("subprocess.run") as mock_run:
        result = run(source, out, skip_preview=True)

    index = tmp_path / "index.html"
    assert result == index
    assert out.getvalue() == f"{index}\n"
    html = index.read_text(encoding="utf-8")
    assert "<h1>Hello</h1>" in html
    assert "<li>a</li>" in html
    assert "<li>b</li>" in html
    mock_run.assert_not_called()


def test_run_missing_source_writes_nothing(tmp_path: Path) -> None:
    """missing input fails with a read error and no output file."""
    out = io.StringIO()

    with pytest.raises(InputError, match="reading markdown"):
        run(tmp_path / "missing.md", out, skip_preview=True)

    assert not (tmp_path / "index.html").exists()
    assert out.getvalue() == ""


def test_run_missing_template_writes_nothing(tmp_path: Path) -> None:
    """bad template aborts before output is written."""
    source = _write_source(tmp_path)

    with pytest.raises(RenderError):
        run(source, io.StringIO(), skip_preview=True, template_file=tmp_path / "no.tmpl")

    assert not (tmp_path / "index.html").exists()


def test_run_with_custom_template(tmp_path: Path) -> None:
    """custom template is used for the page."""
    source = _write_source(tmp_path, "hello")
    template = tmp_path / "page.tmpl"
    template.write_text("<article>{{ body }}</article>", encoding="utf-8")

    run(source, io.StringIO(), skip_preview=True, template_file=template)

    assert (tmp_path / "index.html").read_text() == "<article><p>hello</p>\n</article>"


def test_run_overwrites_previous_output(tmp_path: Path) -> None:
    """existing index.html is replaced."""
    source = _write_source(tmp_path, "new")
    (tmp_path / "index.html").write_text("stale")

    run(source, io.StringIO(), skip_preview=True)

    assert "stale" not in (tmp_path / "index.html").read_text()


def test_run_invokes_preview(tmp_path: Path) -> None:
    """without skip, the written file is previewed."""
    source = _write_source(tmp_path)

    with patch("mdpreview.pipeline.preview") as mock_preview:
        result = run(source, io.StringIO())

    mock_preview.assert_called_once()
    assert mock_preview.call_args.args[0] == result


def test_run_wraps_preview_error(tmp_path: Path) -> None:
    """preview failures name the output file; the file is still written."""
    source = _write_source(tmp_path)

    with patch(
        "mdpreview.pipeline.preview", side_effect=PreviewError("unsupported platform")
    ):
        with pytest.raises(PreviewError, match="preview failed for .*index.html"):
            run(source, io.StringIO())

    assert (tmp_path / "index.html").exists()


def test_run_prints_path_before_writing(tmp_path: Path) -> None:
    """output path is reported even when the write then fails."""
    source = _write_source(tmp_path)
    out = io.StringIO()

    with patch.object(Path, "write_bytes", side_effect=PermissionError("denied")):
        with pytest.raises(OutputError, match="denied"):
            run(source, out, skip_preview=True)

    assert out.getvalue() == f"{tmp_path / 'index.html'}\n"


def test_parse_content_template_error_names_path(tmp_path: Path) -> None:
    """render failures in a custom template name the template file."""
    template = tmp_path / "mytpl.tmpl"
    template.write_text("{{ author }}", encoding="utf-8")

    with pytest.raises(RenderError) as exc_info:
        parse_content("# x", template_file=template)

    assert "mytpl.tmpl" in str(exc_info.value)
