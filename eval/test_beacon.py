"""Tests for one-way beacon dispatch."""
import urllib.error
import unittest.mock as mock

from rztracker import beacon


def test_send_request_runs_on_daemon_thread():
    with mock.patch("rztracker.beacon.threading.Thread") as thread_cls:
        result = beacon.send_request("https://c.example/track?idsite=1")

    assert result is None
    kwargs = thread_cls.call_args.kwargs
    assert kwargs["daemon"] is True
    assert kwargs["target"] is beacon.deliver
    assert kwargs["args"] == ("https://c.example/track?idsite=1",)
    thread_cls.return_value.start.assert_called_once()
    thread_cls.return_value.join.assert_not_called()


def test_deliver_issues_get():
    response = mock.MagicMock()
    response.__enter__.return_value.status = 204
    with mock.patch("rztracker.beacon.urllib.request.urlopen", return_value=response) as urlopen:
        beacon.deliver("https://c.example/track?idsite=1")

    req = urlopen.call_args[0][0]
    assert req.get_method() == "GET"
    assert req.full_url == "https://c.example/track?idsite=1"
    assert req.data is None
    assert urlopen.call_args.kwargs["timeout"] == beacon.BEACON_TIMEOUT_SECONDS


def test_deliver_swallows_network_errors():
    with mock.patch(
        "rztracker.beacon.urllib.request.urlopen",
        side_effect=urllib.error.URLError("unreachable"),
    ):
        beacon.deliver("https://c.example/track")


def test_deliver_swallows_malformed_url():
    beacon.deliver("not a url")
