import json
from datetime import datetime, timezone

import pytest

from recon import cli
from recon.errors import FetchError
from recon.models import Result


class _FakeParser:
    result = None
    error = None
    seen = []

    def parse(self, url):
        self.seen.append(url)
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def fake_parser(monkeypatch):
    _FakeParser.result = Result(
        url="https://example.com/",
        host="example.com",
        title="Hello",
        scraped_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    _FakeParser.error = None
    _FakeParser.seen = []
    monkeypatch.setattr(cli, "Parser", _FakeParser)
    return _FakeParser


def test_main_prints_json(fake_parser, capsys):
    assert cli.main(["https://example.com/"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["title"] == "Hello"
    assert out["site_name"] == ""
    assert fake_parser.seen == ["https://example.com/"]


def test_main_reports_errors_on_stderr(fake_parser, capsys):
    fake_parser.error = FetchError("fetching page https://example.com/: 404 Not Found")
    assert cli.main(["https://example.com/"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error parsing https://example.com/: fetching page" in captured.err


def test_main_requires_url(capsys):
    with pytest.raises(SystemExit):
        cli.main([])
