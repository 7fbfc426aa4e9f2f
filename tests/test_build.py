import json

import pytest

from html_elements import build
from html_elements.fetch import MDN_ELEMENTS_URL, FetchError


def test_build_registry_writes_json_and_log(index_html, tmp_path, monkeypatch):
    monkeypatch.setattr(build, "fetch_html", lambda url: index_html)
    output_path = tmp_path / "elements.json"
    log_dir = tmp_path / "logs"

    registry = build.build_registry(MDN_ELEMENTS_URL, output_path, log_dir)

    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert set(data) == set(registry)
    assert data["input"] == {
        "tag": "input",
        "description": "An input field",
        "type": "form",
        "category": "Forms",
        "url": f"{MDN_ELEMENTS_URL}/input",
        "isVoid": True,
    }

    logs = list(log_dir.glob("*-scrape.md"))
    assert len(logs) == 1
    report = logs[0].read_text(encoding="utf-8")
    assert "# Scrape Report" in report
    assert "- Elements: 9" in report
    assert "Only 9 elements parsed" in report


def test_fetch_failure_writes_nothing(tmp_path, monkeypatch):
    def failing_fetch(url):
        raise FetchError(f"HTTP 500 for {url}")

    monkeypatch.setattr(build, "fetch_html", failing_fetch)
    output_path = tmp_path / "elements.json"
    output_path.write_text('{"existing": true}', encoding="utf-8")

    with pytest.raises(FetchError):
        build.build_registry(MDN_ELEMENTS_URL, output_path, tmp_path / "logs")

    assert output_path.read_text(encoding="utf-8") == '{"existing": true}'
    assert not (tmp_path / "logs").exists()


def test_empty_page_is_a_fetch_error(tmp_path, monkeypatch):
    monkeypatch.setattr(build, "fetch_html", lambda url: "")

    with pytest.raises(FetchError, match="Empty HTML"):
        build.build_registry(MDN_ELEMENTS_URL, tmp_path / "elements.json", tmp_path / "logs")

    assert not (tmp_path / "elements.json").exists()


def test_main_exits_on_error(tmp_path, monkeypatch):
    def failing_fetch(url):
        raise FetchError("offline")

    monkeypatch.setattr(build, "fetch_html", failing_fetch)
    monkeypatch.setattr(build, "DATA_PATH", tmp_path / "elements.json")

    with pytest.raises(SystemExit) as excinfo:
        build.main()

    assert excinfo.value.code == 1
    assert not (tmp_path / "elements.json").exists()
