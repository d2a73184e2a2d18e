import json

from scripts.generate import main


class DummyResp:
    def __init__(self, data, status_code=200):
        self._data = data
        self.status_code = status_code
        self.text = json.dumps(data)

    def json(self):
        return self._data


def test_cli_posts_only_given_fields(monkeypatch, capsys):
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append((url, json))
        return DummyResp({"videoUrl": "https://cdn/v.mp4", "prompt": "p", "aspectRatio": "9:16", "duration": 8})

    monkeypatch.setattr("requests.post", fake_post)

    rc = main(["p", "--aspect-ratio", "9:16", "--url", "http://studio.local/"])

    assert rc == 0
    assert calls == [("http://studio.local/api/generate", {"prompt": "p", "aspectRatio": "9:16"})]
    assert "https://cdn/v.mp4" in capsys.readouterr().out


def test_cli_exit_code_on_error(monkeypatch, capsys):
    monkeypatch.setattr(
        "requests.post",
        lambda url, json=None, timeout=None: DummyResp({"error": "Unable to read a video URL from the model output."}, 502),
    )

    rc = main(["--url", "http://studio.local"])

    assert rc == 1
    assert "Unable to read a video URL" in capsys.readouterr().out
