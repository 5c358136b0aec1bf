"""
Tests for the marketroute CLI.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from marketroute.app_shell.cli import main

ROUTING_YAML = Path(__file__).resolve().parents[2] / "routing.yaml"


@pytest.fixture(autouse=True)
def no_rules_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MARKETROUTE_RULES_PATH", raising=False)


class TestCommands:
    def test_slugify(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["slugify", "Hello, World!"])
        assert capsys.readouterr().out.strip() == "hello-world"

    def test_parse_url(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["parse-url", "/th-th/news/x"])
        out = capsys.readouterr().out
        assert "siteaccess: th-th" in out
        assert "locale:     tha-TH" in out
        assert "path:       /news/x" in out

    def test_build_url(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["build-url", "my", "eng-MY", "/about"])
        assert capsys.readouterr().out.strip() == "/my-en/about"

    def test_build_url_without_path(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["build-url", "th", "eng-TH"])
        assert capsys.readouterr().out.strip() == "/th-en"

    def test_strip_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["strip-prefix", "/th-en/news/x"])
        assert capsys.readouterr().out.strip() == "/news/x"

    def test_rules_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--rules", str(ROUTING_YAML), "strip-prefix", "/my-en"])
        assert capsys.readouterr().out.strip() == "/"


class TestCheckRules:
    def test_valid(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check-rules", str(ROUTING_YAML)])
        assert "OK (4 locales, 3 markets, 4 siteaccesses)" in capsys.readouterr().out

    def test_missing_file_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check-rules", str(tmp_path / "nope.yaml")])
        assert exc_info.value.code == 1

    def test_invalid_file_exits(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("global_locale: eng-GB\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            main(["check-rules", str(path)])

    def test_bad_rules_option_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["--rules", str(tmp_path / "nope.yaml"), "parse-url", "/x"])
