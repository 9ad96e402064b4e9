"""Client for the Guardian content API.

Example:
    client = GuardianContentClient("your-api-key")
    response = await (
        client.search("Elections")
        .page_size(10)
        .show_fields([Field.BYLINE, Field.LAST_MODIFIED])
        .order_by(OrderBy.NEWEST)
        .send()
    )
"""

import logging
from collections.abc import Iterable

import httpx
import pydantic

from aletheia.config import Config
from aletheia.encoding import format_datetime, generate_blocks, generate_sequence
from aletheia.enums import Block, Endpoint, Field, OrderBy, OrderDate, Tag, UseDate
from aletheia.errors import ApiError, DecodeError, MissingParameterError, TransportError
from aletheia.models import ResponseEnvelope, SearchResponse

logger = logging.getLogger(__name__)


class GuardianContentClient:
    """Async client that builds one request at a time against the content API.

    Each builder method stores one query parameter and returns the client so
    calls can be chained. ``send`` dispatches the accumulated parameters and
    then clears them, so the same client can build an unrelated follow-up
    request. A client must not be used for two overlapping ``send`` calls.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = Config.API_BASE_URL,
        timeout: float = Config.DEFAULT_TIMEOUT,
    ):
        """Initialize the client.

        Args:
            api_key: Key sent in the ``api-key`` header. An empty key is
                allowed; the header is then omitted and the API rejects the
                request.
            base_url: Root URL of the content API.
            timeout: Timeout in seconds handed to the HTTP transport.
        """
        self.api_key: str = api_key
        self.base_url: str = base_url.rstrip("/")
        self.timeout: float = timeout
        self.request: dict[str, str] = {}
        self.endpoint_selection: Endpoint = Endpoint.CONTENT

    @property
    def params(self) -> dict[str, str]:
        """A copy of the query parameters accumulated so far."""
        return dict(self.request)

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        return {Config.API_KEY_HEADER: self.api_key}

    def _set(self, key: str, value: str) -> "GuardianContentClient":
        self.request[key] = value
        return self

    def reset(self) -> "GuardianContentClient":
        """Drop all accumulated parameters and target the content endpoint."""
        self.request.clear()
        self.endpoint_selection = Endpoint.CONTENT
        return self

    # --- Builder methods ---

    def endpoint(self, endpoint: Endpoint) -> "GuardianContentClient":
        """Select the endpoint to target.

        ``Endpoint.SINGLE_ITEM`` uses the value given to ``search`` as the
        item path, e.g.
        ``client.endpoint(Endpoint.SINGLE_ITEM).search("books/2022/jan/01/...")``.
        """
        self.endpoint_selection = endpoint
        return self

    def search(self, q: str) -> "GuardianContentClient":
        """Set the search query.

        Supports AND, OR and NOT operators and exact phrases in double quotes.
        """
        return self._set("q", q)

    def page(self, page: int) -> "GuardianContentClient":
        return self._set("page", str(page))

    def page_size(self, page_size: int) -> "GuardianContentClient":
        """Set the number of results per page.

        The API accepts 1 to 200 and rejects anything else.
        """
        return self._set("page-size", str(page_size))

    def order_by(self, order_by: OrderBy) -> "GuardianContentClient":
        return self._set("order-by", order_by.value)

    def order_date(self, order_date: OrderDate) -> "GuardianContentClient":
        return self._set("order-date", order_date.value)

    def use_date(self, use_date: UseDate) -> "GuardianContentClient":
        """Select which date the from/to date filters apply to."""
        return self._set("use-date", use_date.value)

    def show_fields(self, fields: Iterable[Field]) -> "GuardianContentClient":
        """Request display fields. ``Field.ALL`` overrides all others."""
        return self._set("show-fields", generate_sequence(fields))

    def query_fields(self, fields: Iterable[Field]) -> "GuardianContentClient":
        """Restrict which indexed fields the query terms are searched in."""
        return self._set("query-fields", generate_sequence(fields))

    def show_tags(self, tags: Iterable[Tag]) -> "GuardianContentClient":
        """Request associated tags. ``Tag.ALL`` overrides all others."""
        return self._set("show-tags", generate_sequence(tags))

    def show_blocks(self, blocks: Iterable[Block]) -> "GuardianContentClient":
        """Request content blocks. ``Block.ALL`` overrides all others."""
        return self._set("show-blocks", generate_blocks(blocks))

    def date_from(self, year: int, month: int, day: int) -> "GuardianContentClient":
        """Only return content published on or after this date."""
        return self._set("from-date", f"{year}-{month}-{day}")

    def date_to(self, year: int, month: int, day: int) -> "GuardianContentClient":
        """Only return content published on or before this date."""
        return self._set("to-date", f"{year}-{month}-{day}")

    def datetime_from(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        offset_hours: int,
    ) -> "GuardianContentClient":
        """Like ``date_from`` with a time of day and an hour offset from UTC.

        Leaves ``from-date`` untouched if the date or time does not exist.
        """
        return self._set_datetime(
            "from-date", year, month, day, hour, minute, second, offset_hours
        )

    def datetime_to(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        offset_hours: int,
    ) -> "GuardianContentClient":
        """Like ``date_to`` with a time of day and an hour offset from UTC.

        Leaves ``to-date`` untouched if the date or time does not exist.
        """
        return self._set_datetime(
            "to-date", year, month, day, hour, minute, second, offset_hours
        )

    def _set_datetime(self, key: str, *parts: int) -> "GuardianContentClient":
        formatted = format_datetime(*parts)
        if formatted:
            self.request[key] = formatted
        else:
            logger.debug(f"Ignoring invalid date/time for {key}: {parts}")
        return self

    def show_section(self, show_section: bool) -> "GuardianContentClient":
        return self._set("show-section", "true" if show_section else "false")

    def section(self, section: str) -> "GuardianContentClient":
        return self._set("section", section)

    def reference(self, reference: str) -> "GuardianContentClient":
        return self._set("reference", reference)

    def reference_type(self, reference_type: str) -> "GuardianContentClient":
        return self._set("reference-type", reference_type)

    def tag(self, tag: str) -> "GuardianContentClient":
        """Only return content with this tag, e.g. ``"technology/apple"``."""
        return self._set("tag", tag)

    def ids(self, ids: str) -> "GuardianContentClient":
        return self._set("ids", ids)

    def production_office(self, production_office: str) -> "GuardianContentClient":
        return self._set("production-office", production_office)

    def lang(self, lang: str) -> "GuardianContentClient":
        """Only return content in this ISO language code, e.g. ``"fr"``."""
        return self._set("lang", lang)

    def star_rating(self, star_rating: int) -> "GuardianContentClient":
        return self._set("star-rating", str(star_rating))

    def tag_type(self, tag_type: str) -> "GuardianContentClient":
        """Only return tags of this type. Valid with ``Endpoint.TAGS``."""
        return self._set("type", tag_type)

    # --- Dispatch ---

    def _resolve_path(self) -> str:
        if self.endpoint_selection is Endpoint.CONTENT:
            return "search"
        if self.endpoint_selection is Endpoint.SINGLE_ITEM:
            item = self.request.get("q")
            if item is None:
                raise MissingParameterError("q")
            return item
        return self.endpoint_selection.value

    async def send(self) -> SearchResponse:
        """Send the accumulated request and decode the response.

        Parameters and endpoint selection are cleared once the request has
        been attempted, whatever the outcome.

        Returns:
            The decoded ``response`` payload. An envelope carrying neither a
            message nor a payload yields an empty ``SearchResponse``.

        Raises:
            MissingParameterError: ``Endpoint.SINGLE_ITEM`` without a search
                term. Raised before any network call; parameters are kept.
            TransportError: The HTTP request could not be completed.
            DecodeError: The body is not a valid response envelope.
            ApiError: The API reported an error.
        """
        path = self._resolve_path()
        url = f"{self.base_url}/{path}"
        params = dict(self.request)

        try:
            logger.debug(f"GET {url} with parameters {sorted(params)}")
            try:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(
                        url, params=params, headers=self._headers()
                    )
            except httpx.RequestError as e:
                raise TransportError(f"Request to {url} failed: {e}") from e
            envelope = _decode(response)
        finally:
            self.reset()

        return _unwrap(envelope, response.status_code)


def _decode(response: httpx.Response) -> ResponseEnvelope:
    try:
        return ResponseEnvelope.model_validate_json(response.content)
    except pydantic.ValidationError as e:
        if not response.is_success:
            raise ApiError(
                f"HTTP {response.status_code}", status_code=response.status_code
            ) from e
        raise DecodeError(f"Invalid response body: {e}") from e


def _unwrap(envelope: ResponseEnvelope, status_code: int) -> SearchResponse:
    if envelope.message is not None:
        logger.error(f"API error: {envelope.message}")
        raise ApiError(envelope.message, status_code=status_code)

    payload = envelope.response
    if payload is None:
        logger.warning("Response envelope has neither message nor payload")
        return SearchResponse()

    if payload.status == "error" and payload.message is not None:
        logger.error(f"API error: {payload.message}")
        raise ApiError(payload.message, status_code=status_code)

    return payload
