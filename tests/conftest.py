"""Shared test fixtures and configuration for the aletheia test suite."""

import json
from typing import Any, Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from aletheia.client import GuardianContentClient


def _make_response(body: Any, status_code: int = 200) -> MagicMock:
    """Create a mock httpx.Response.

    Args:
        body: A JSON-serializable object, or raw bytes used as-is.
        status_code: HTTP status of the response.

    Returns:
        MagicMock: Mock exposing ``content``, ``status_code`` and ``is_success``.
    """
    response = MagicMock()
    response.content = body if isinstance(body, bytes) else json.dumps(body).encode()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    return response


@pytest.fixture
def make_response():
    """Return the factory for mock httpx responses."""
    return _make_response


@pytest.fixture
def client() -> GuardianContentClient:
    """Create a client with a test API key."""
    return GuardianContentClient("test-api-key")


@pytest.fixture
def mock_transport() -> Generator[AsyncMock, None, None]:
    """Patch httpx.AsyncClient and yield the mock used inside ``async with``.

    Yields:
        AsyncMock: The async client whose ``get`` the test configures.
    """
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_async_client = AsyncMock()
        mock_async_client.__aenter__ = AsyncMock(return_value=mock_async_client)
        mock_async_client.__aexit__ = AsyncMock(return_value=None)
        mock_client_class.return_value = mock_async_client
        yield mock_async_client


@pytest.fixture
def sample_search_payload() -> dict:
    """A content search response as returned by the /search endpoint."""
    return {
        "response": {
            "status": "ok",
            "userTier": "developer",
            "total": 2,
            "startIndex": 1,
            "pageSize": 10,
            "currentPage": 1,
            "pages": 1,
            "orderBy": "newest",
            "results": [
                {
                    "id": "politics/2024/jul/05/general-election-results",
                    "type": "article",
                    "sectionId": "politics",
                    "sectionName": "Politics",
                    "webPublicationDate": "2024-07-05T06:00:00Z",
                    "webTitle": "General election results",
                    "webUrl": "https://www.theguardian.com/politics/2024/jul/05/general-election-results",
                    "apiUrl": "https://content.guardianapis.com/politics/2024/jul/05/general-election-results",
                    "isHosted": False,
                    "pillarId": "pillar/news",
                    "pillarName": "News",
                    "fields": {
                        "byline": "Political staff",
                        "shortUrl": "https://www.theguardian.com/p/abc12",
                        "wordcount": "812",
                        "lastModified": "2024-07-05T09:12:00Z",
                    },
                    "tags": [
                        {
                            "id": "politics/general-election-2024",
                            "type": "keyword",
                            "webTitle": "General election 2024",
                            "webUrl": "https://www.theguardian.com/politics/general-election-2024",
                            "apiUrl": "https://content.guardianapis.com/politics/general-election-2024",
                        }
                    ],
                },
                {
                    "id": "world/2024/jul/04/france-runoff",
                    "type": "liveblog",
                    "sectionId": "world",
                    "sectionName": "World news",
                    "webPublicationDate": "2024-07-04T18:30:00Z",
                    "webTitle": "France runoff live",
                    "webUrl": "https://www.theguardian.com/world/2024/jul/04/france-runoff",
                    "apiUrl": "https://content.guardianapis.com/world/2024/jul/04/france-runoff",
                    "isHosted": False,
                    "pillarId": "pillar/news",
                    "pillarName": "News",
                },
            ],
        }
    }


@pytest.fixture
def sample_item_payload() -> dict:
    """A single-item response carrying a liveblog with blocks."""
    return {
        "response": {
            "status": "ok",
            "userTier": "developer",
            "total": 1,
            "content": {
                "id": "world/2024/jul/04/france-runoff",
                "type": "liveblog",
                "sectionId": "world",
                "sectionName": "World news",
                "webPublicationDate": "2024-07-04T18:30:00Z",
                "webTitle": "France runoff live",
                "webUrl": "https://www.theguardian.com/world/2024/jul/04/france-runoff",
                "apiUrl": "https://content.guardianapis.com/world/2024/jul/04/france-runoff",
                "isHosted": False,
                "section": {
                    "id": "world",
                    "webTitle": "World news",
                    "webUrl": "https://www.theguardian.com/world",
                    "apiUrl": "https://content.guardianapis.com/world",
                    "editions": [
                        {
                            "id": "world",
                            "webTitle": "World news",
                            "webUrl": "https://www.theguardian.com/world",
                            "apiUrl": "https://content.guardianapis.com/world",
                            "code": "default",
                        }
                    ],
                },
                "blocks": {
                    "main": {
                        "id": "main-1",
                        "bodyHtml": "<figure></figure>",
                        "elements": [
                            {
                                "type": "image",
                                "assets": [
                                    {
                                        "type": "image",
                                        "mimeType": "image/jpeg",
                                        "file": "https://media.guim.co.uk/1000.jpg",
                                        "typeData": {
                                            "width": 1000,
                                            "height": 600,
                                            "isMaster": True,
                                        },
                                    }
                                ],
                                "imageTypeData": {
                                    "caption": "Voters queue outside a polling station",
                                    "credit": "Photograph: Agency",
                                },
                            }
                        ],
                    },
                    "body": [
                        {
                            "id": "block-2",
                            "bodyHtml": "<p>Polls have closed.</p>",
                            "title": "Polls close",
                            "attributes": {"keyEvent": True},
                            "published": True,
                            "publishedDate": "2024-07-04T18:00:00Z",
                            "contributors": ["profile/reporter"],
                            "elements": [
                                {
                                    "type": "text",
                                    "assets": [],
                                    "textTypeData": {
                                        "html": "<p>Polls have closed.</p>"
                                    },
                                },
                                {
                                    "type": "tweet",
                                    "assets": [],
                                    "tweetTypeData": {
                                        "source": "Twitter",
                                        "url": "https://twitter.com/x/status/1",
                                        "id": "1",
                                    },
                                },
                                {
                                    "type": "hologram",
                                    "assets": [],
                                    "hologramTypeData": {"depth": 3},
                                },
                            ],
                        }
                    ],
                    "totalBodyBlocks": 1,
                },
            },
        }
    }
