"""Tests for the CLI module."""

import json
import logging

import pytest

from blog_distiller.cli import main


@pytest.fixture
def info_logs(caplog):
    caplog.set_level(logging.INFO)
    return caplog


class TestCLICheck:
    """Tests for the check command."""

    def test_check_clean_content(self, content_dir, info_logs):
        """check succeeds when every document loads."""
        result = main(["check", "--content", str(content_dir)])

        assert result == 0
        assert "Articles: 3" in info_logs.text

    def test_check_reports_malformed(self, content_dir, caplog):
        """check fails and names each excluded document."""
        (content_dir / "broken.md").write_text("---\ntitle: 'x'\n---\nBody\n")

        result = main(["check", "--content", str(content_dir)])

        assert result == 1
        assert "broken.md: Missing required key(s): date, summary" in caplog.text

    def test_check_requires_content(self, caplog):
        result = main(["check"])

        assert result == 1
        assert "content_dir" in caplog.text

    def test_check_missing_directory(self, tmp_path, caplog):
        result = main(["check", "--content", str(tmp_path / "missing")])

        assert result == 1
        assert "Content directory not found" in caplog.text

    def test_check_duplicate_slug(self, content_dir, caplog, prism_document):
        """A slug collision fails the build under the default policy."""
        (content_dir / "Prism-NextJS.md").write_text(prism_document)

        result = main(["check", "--content", str(content_dir)])

        assert result == 1
        assert "Duplicate slug 'prism-nextjs'" in caplog.text

    def test_check_duplicate_slug_skip(self, content_dir, caplog, prism_document):
        """Under the skip policy the later duplicate is reported as an error."""
        (content_dir / "prism_nextjs.md").write_text(prism_document)

        result = main(["check", "--content", str(content_dir), "--duplicates", "skip"])

        assert result == 1
        assert "prism_nextjs.md: Duplicate slug 'prism-nextjs'" in caplog.text

    def test_check_reports_undecodable_file(self, content_dir, caplog):
        """A file that is not UTF-8 is named in the report."""
        (content_dir / "latin1.md").write_bytes(b"---\ntitle: 'Caf\xe9'\n---\nBody\n")

        result = main(["check", "--content", str(content_dir)])

        assert result == 1
        assert "latin1.md: Document is not valid UTF-8" in caplog.text
        assert "Failed to load content" not in caplog.text

    def test_check_reads_config_file(self, content_dir, tmp_path, info_logs):
        """--config supplies the content directory."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"content_dir": str(content_dir), "max_workers": 2}))

        result = main(["check", "--config", str(config_path)])

        assert result == 0
        assert "Articles: 3" in info_logs.text


class TestCLIList:
    """Tests for the list command."""

    def test_list_published(self, content_dir, info_logs):
        """list shows published articles newest first."""
        result = main(["list", "--content", str(content_dir)])

        assert result == 0
        text = info_logs.text
        assert "2023-01-11  guides-react-context  Using the React Context API" in text
        assert "2023-01-04  prism-nextjs  Adding Prism to a Next.js project" in text
        assert text.index("guides-react-context") < text.index("prism-nextjs")
        assert "wip" not in text

    def test_list_drafts(self, content_dir, info_logs):
        result = main(["list", "--content", str(content_dir), "--drafts"])

        assert result == 0
        assert "2023-02-01  wip  Work in progress (draft)" in info_logs.text
        assert "prism-nextjs" not in info_logs.text

    def test_list_all(self, content_dir, info_logs):
        result = main(["list", "--content", str(content_dir), "--all"])

        assert result == 0
        assert "wip" in info_logs.text
        assert "prism-nextjs" in info_logs.text

    def test_list_drafts_and_all_exclusive(self, content_dir):
        with pytest.raises(SystemExit):
            main(["list", "--content", str(content_dir), "--drafts", "--all"])


class TestCLIShow:
    """Tests for the show command."""

    def test_show_article(self, content_dir, info_logs):
        result = main(["show", "guides-react-context", "--content", str(content_dir)])

        assert result == 0
        assert "Title: Using the React Context API" in info_logs.text
        assert "Code languages: jsx, js" in info_logs.text
        assert "Authors: default" in info_logs.text

    def test_show_unknown_slug(self, content_dir, caplog):
        """An unknown slug is reported, not raised."""
        result = main(["show", "nope", "--content", str(content_dir)])

        assert result == 1
        assert "Article not found: nope" in caplog.text


class TestCLIExport:
    """Tests for the export command."""

    def test_export_manifest_and_feed(self, content_dir, tmp_path):
        output_dir = tmp_path / "public"

        result = main([
            "export",
            "--content", str(content_dir),
            "--output", str(output_dir),
            "--site-url", "https://blog.example.com",
        ])

        assert result == 0
        manifest = json.loads((output_dir / "content-manifest.json").read_text())
        assert [a["slug"] for a in manifest["articles"]] == ["guides-react-context", "prism-nextjs"]
        assert (output_dir / "feed.xml").exists()

    def test_export_without_site_url_skips_feed(self, content_dir, tmp_path, info_logs):
        output_dir = tmp_path / "public"

        result = main(["export", "--content", str(content_dir), "--output", str(output_dir)])

        assert result == 0
        assert (output_dir / "content-manifest.json").exists()
        assert not (output_dir / "feed.xml").exists()
        assert "skipping RSS feed" in info_logs.text

    def test_export_include_drafts(self, content_dir, tmp_path):
        output_dir = tmp_path / "public"

        result = main([
            "export",
            "--content", str(content_dir),
            "--output", str(output_dir),
            "--include-drafts",
        ])

        assert result == 0
        manifest = json.loads((output_dir / "content-manifest.json").read_text())
        assert manifest["articles"][0]["slug"] == "wip"
        assert manifest["build"]["include_drafts"] is True


    def test_export_excludes_control_characters(self, content_dir, tmp_path, caplog):
        """A title with an escaped control character is excluded, not exported."""
        (content_dir / "bell.md").write_text(
            "---\ntitle: \"Bell\\a\"\ndate: '2023-03-01'\nsummary: 'Ding.'\n---\nBody\n"
        )
        output_dir = tmp_path / "public"

        result = main([
            "export",
            "--content", str(content_dir),
            "--output", str(output_dir),
            "--site-url", "https://blog.example.com",
        ])

        assert result == 0
        assert "bell.md" in caplog.text
        assert b"Bell" not in (output_dir / "feed.xml").read_bytes()

    def test_export_reports_unwritable_feed_value(self, content_dir, tmp_path, caplog):
        """A config value XML cannot hold fails the export without a traceback."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"content_dir": str(content_dir), "site_title": "Ding\u0007"}))

        result = main([
            "export",
            "--config", str(config_path),
            "--output", str(tmp_path / "public"),
            "--site-url", "https://blog.example.com",
        ])

        assert result == 1
        assert "Failed to write export" in caplog.text


class TestCLIMain:
    """Tests for the top-level entry point."""

    def test_no_command_prints_help(self, capsys):
        result = main([])

        assert result == 0
        assert "blog-distiller" in capsys.readouterr().out
