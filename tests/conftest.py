"""Shared fixtures: a fake YouTube Data API resource and test settings."""

import json
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from fecom.env import Settings


def make_http_error(status: int, reason: str = "backendError") -> HttpError:
    resp = httplib2.Response({"status": status})
    content = json.dumps(
        {"error": {"code": status, "message": reason, "errors": [{"reason": reason}]}}
    ).encode("utf-8")
    return HttpError(resp, content)


def search_item(video_id):
    return {"kind": "youtube#searchResult", "id": {"kind": "youtube#video", "videoId": video_id}}


def thread_item(published_at, text):
    return {
        "kind": "youtube#commentThread",
        "snippet": {
            "topLevelComment": {
                "snippet": {"publishedAt": published_at, "textOriginal": text, "textDisplay": f"<b>{text}</b>"}
            }
        },
    }


class FakeYouTube:
    """Stands in for googleapiclient's youtube resource.

    ``search_responses`` are returned in order, one per search.list call.
    ``comment_responses`` maps videoId to a response dict or an exception.
    """

    def __init__(self, search_responses=None, comment_responses=None):
        self.search_responses = list(search_responses or [])
        self.comment_responses = dict(comment_responses or {})
        self.search_calls = []
        self.comment_calls = []
        self.resource = MagicMock()
        self.resource.search.return_value.list.side_effect = self._search_list
        self.resource.commentThreads.return_value.list.side_effect = self._comment_list

    def _request(self, outcome):
        request = MagicMock()
        if isinstance(outcome, BaseException):
            request.execute.side_effect = outcome
        else:
            request.execute.return_value = outcome
        return request

    def _search_list(self, **kwargs):
        self.search_calls.append(kwargs)
        outcome = self.search_responses.pop(0) if self.search_responses else {"items": []}
        return self._request(outcome)

    def _comment_list(self, **kwargs):
        self.comment_calls.append(kwargs)
        return self._request(self.comment_responses.get(kwargs["videoId"], {"items": []}))


@pytest.fixture
def fake_youtube():
    return FakeYouTube


@pytest.fixture
def settings(tmp_path):
    return Settings(
        api_key="test-key",
        timezone="Asia/Jakarta",
        output_file=str(tmp_path / "youtube_comments.tsv"),
    )
