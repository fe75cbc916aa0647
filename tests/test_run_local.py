import httpx
from scripts.run_local import wait_ready


def test_wait_ready_polls_until_healthy(monkeypatch):
    answers = iter([
        httpx.ConnectError("connection refused"),
        httpx.Response(503),
        httpx.Response(200, json={"status": "ok"}),
    ])
    seen = []

    def fake_get(url, timeout):
        seen.append(url)
        answer = next(answers)
        if isinstance(answer, Exception):
            raise answer
        return answer

    monkeypatch.setattr(httpx, "get", fake_get)
    monkeypatch.setattr("scripts.run_local.time.sleep", lambda s: None)

    assert wait_ready("http://127.0.0.1:8000", timeout_s=5) is True
    assert seen == ["http://127.0.0.1:8000/health"] * 3


def test_wait_ready_gives_up_after_timeout(monkeypatch):
    def fake_get(url, timeout):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(httpx, "get", fake_get)
    monkeypatch.setattr("scripts.run_local.time.sleep", lambda s: None)

    assert wait_ready("http://127.0.0.1:8000", timeout_s=0) is False
