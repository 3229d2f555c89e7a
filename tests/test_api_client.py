from unittest.mock import Mock, patch

import pytest
import requests

from client.api_client import EventFinderClient, post_event


def fake_response(status_code=200, payload=None):
    resp = Mock()
    resp.status_code = status_code
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    else:
        resp.raise_for_status.return_value = None
    return resp


def test_list_events_drops_empty_params():
    client = EventFinderClient(api_url="http://api.test/api/")
    with patch("client.api_client.requests.get", return_value=fake_response(payload=[])) as mock_get:
        assert client.list_events(lat=53.35, lng=-6.26, radius=5) == []

    url = mock_get.call_args[0][0]
    assert url == "http://api.test/api/events"
    assert mock_get.call_args[1]["params"] == {"lat": 53.35, "lng": -6.26, "radius": 5}


def test_get_event_returns_none_on_404():
    client = EventFinderClient(api_url="http://api.test/api")
    with patch("client.api_client.requests.get", return_value=fake_response(404, {"error": "Event not found"})):
        assert client.get_event("missing") is None


def test_get_event_raises_on_server_error():
    client = EventFinderClient(api_url="http://api.test/api")
    with patch("client.api_client.requests.get", return_value=fake_response(500)):
        with pytest.raises(requests.HTTPError):
            client.get_event("abc")


def test_similar_events_passes_limit():
    client = EventFinderClient(api_url="http://api.test/api")
    with patch("client.api_client.requests.get", return_value=fake_response(payload=[])) as mock_get:
        client.similar_events("abc", limit=2)
    assert mock_get.call_args[0][0] == "http://api.test/api/events/abc/similar"
    assert mock_get.call_args[1]["params"] == {"limit": 2}


def test_post_event_uses_default_client():
    created = {"id": "new-id", "title": "Board Game Night", "currentParticipants": 0}
    with patch("client.api_client.requests.post", return_value=fake_response(201, created)) as mock_post:
        result = post_event({"title": "Board Game Night"})

    assert result == created
    assert mock_post.call_args[1]["json"] == {"title": "Board Game Night"}
    assert mock_post.call_args[0][0].endswith("/events")
