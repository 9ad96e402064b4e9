"""Controlled vocabulary for Guardian content API query parameters.

Every member's value is the exact token sent on the wire, so an illegal
parameter value cannot be built from these types. ``Field.ALL``,
``Tag.ALL`` and ``Block.ALL`` are collection-level directives: when present
in a selection they replace every other member with ``"all"``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class OrderBy(str, Enum):
    """Order in which results are returned."""

    NEWEST = "newest"
    OLDEST = "oldest"
    RELEVANCE = "relevance"


class OrderDate(str, Enum):
    """Which date is used to order the results."""

    PUBLISHED = "published"
    NEWSPAPER_EDITION = "newspaper-edition"
    LAST_MODIFIED = "last-modified"


class UseDate(str, Enum):
    """Which date the from/to date filters apply to."""

    PUBLISHED = "published"
    FIRST_PUBLICATION = "first-publication"
    NEWSPAPER_EDITION = "newspaper-edition"
    LAST_MODIFIED = "last-modified"


class Field(str, Enum):
    """Display fields that can be requested or searched."""

    TRAIL_TEXT = "trailText"
    HEADLINE = "headline"
    SHOW_IN_RELATED_CONTENT = "showInRelatedContent"
    BODY = "body"
    BODY_TEXT = "bodyText"
    LAST_MODIFIED = "lastModified"
    HAS_STORY_PACKAGE = "hasStoryPackage"
    SCORE = "score"
    STANDFIRST = "standfirst"
    SHORT_URL = "shortUrl"
    BYLINE = "byline"
    THUMBNAIL = "thumbnail"
    WORDCOUNT = "wordcount"
    COMMENTABLE = "commentable"
    IS_PREMODERATED = "isPremoderated"
    ALLOW_UGC = "allowUgc"
    PUBLICATION = "publication"
    INTERNAL_PAGE_CODE = "internalPageCode"
    PRODUCTION_OFFICE = "productionOffice"
    SHOULD_HIDE_ADVERTS = "shouldHideAdverts"
    LIVE_BLOGGING_NOW = "liveBloggingNow"
    COMMENT_CLOSE_DATE = "commentCloseDate"
    STAR_RATING = "starRating"
    ALL = "all"
    """Override all other fields."""

    @property
    def is_all(self) -> bool:
        return self is Field.ALL


class Tag(str, Enum):
    """Tag categories that can be attached to results."""

    BLOG = "blog"
    CONTRIBUTOR = "contributor"
    KEYWORD = "keyword"
    NEWSPAPER_BOOK = "newspaper-book"
    NEWSPAPER_BOOK_SECTION = "newspaper-book-section"
    PUBLICATION = "publication"
    SERIES = "series"
    TONE = "tone"
    TYPE = "type"
    ALL = "all"
    """Override all other tags."""

    @property
    def is_all(self) -> bool:
        return self is Tag.ALL


class Endpoint(str, Enum):
    """API endpoint targeted by a request.

    ``CONTENT`` is sent as the ``search`` path and ``SINGLE_ITEM`` uses the
    search term itself as the path; see ``GuardianContentClient.send``.
    """

    CONTENT = "content"
    TAGS = "tags"
    SECTIONS = "sections"
    EDITIONS = "editions"
    SINGLE_ITEM = "single-item"


class BlockKind(str, Enum):
    """Discriminator for :class:`Block` selectors."""

    MAIN = "main"
    BODY = "body"
    ALL = "all"
    BODY_LATEST = "body-latest"
    BODY_LATEST_WITH = "body-latest-with"
    BODY_OLDEST = "body-oldest"
    BODY_OLDEST_WITH = "body-oldest-with"
    BODY_BLOCK_ID = "body-block-id"
    BODY_AROUND_BLOCK_ID = "body-around-block-id"
    BODY_AROUND_BLOCK_ID_WITH = "body-around-block-id-with"
    BODY_KEY_EVENTS = "body-key-events"
    BODY_PUBLISHED_SINCE = "body-published-since"


@dataclass(frozen=True)
class Block:
    """A ``show-blocks`` selector.

    Simple selectors are available as class constants (``Block.MAIN``,
    ``Block.BODY``, ``Block.ALL``, ``Block.BODY_LATEST``, ``Block.BODY_OLDEST``,
    ``Block.BODY_KEY_EVENTS``). Selectors carrying a limit, a block id or a
    timestamp are built with the class methods below.
    """

    kind: BlockKind
    block_id: str | None = None
    limit: int | None = None
    timestamp: int | None = None

    MAIN: ClassVar["Block"]
    BODY: ClassVar["Block"]
    ALL: ClassVar["Block"]
    BODY_LATEST: ClassVar["Block"]
    BODY_OLDEST: ClassVar["Block"]
    BODY_KEY_EVENTS: ClassVar["Block"]

    @classmethod
    def body_latest_with(cls, limit: int) -> "Block":
        """The latest ``limit`` body blocks."""
        return cls(BlockKind.BODY_LATEST_WITH, limit=limit)

    @classmethod
    def body_oldest_with(cls, limit: int) -> "Block":
        """The oldest ``limit`` body blocks."""
        return cls(BlockKind.BODY_OLDEST_WITH, limit=limit)

    @classmethod
    def body_block_id(cls, block_id: str) -> "Block":
        """Only the body block with the given id."""
        return cls(BlockKind.BODY_BLOCK_ID, block_id=block_id)

    @classmethod
    def body_around_block_id(cls, block_id: str) -> "Block":
        """The given block and the blocks either side of it."""
        return cls(BlockKind.BODY_AROUND_BLOCK_ID, block_id=block_id)

    @classmethod
    def body_around_block_id_with(cls, block_id: str, limit: int) -> "Block":
        """The given block and ``limit`` blocks either side of it."""
        return cls(BlockKind.BODY_AROUND_BLOCK_ID_WITH, block_id=block_id, limit=limit)

    @classmethod
    def body_published_since(cls, timestamp: int) -> "Block":
        """Body blocks published since the epoch-millisecond ``timestamp``."""
        return cls(BlockKind.BODY_PUBLISHED_SINCE, timestamp=timestamp)

    @property
    def is_all(self) -> bool:
        return self.kind is BlockKind.ALL

    def to_wire(self) -> str:
        """Return the wire token for this selector."""
        kind = self.kind
        if kind in (BlockKind.MAIN, BlockKind.BODY, BlockKind.ALL):
            return kind.value
        # BODY_OLDEST shares the latest token; existing callers rely on it.
        if kind in (BlockKind.BODY_LATEST, BlockKind.BODY_OLDEST):
            return "body:latest"
        if kind is BlockKind.BODY_LATEST_WITH:
            return f"body:latest:{self.limit}"
        if kind is BlockKind.BODY_OLDEST_WITH:
            return f"body:oldest:{self.limit}"
        if kind is BlockKind.BODY_BLOCK_ID:
            return f"body:{self.block_id}"
        if kind is BlockKind.BODY_AROUND_BLOCK_ID:
            return f"body:around:{self.block_id}"
        if kind is BlockKind.BODY_AROUND_BLOCK_ID_WITH:
            return f"body:around:{self.block_id}:{self.limit}"
        if kind is BlockKind.BODY_KEY_EVENTS:
            return "body:key-events"
        return f"body:published-since:{self.timestamp}"


Block.MAIN = Block(BlockKind.MAIN)
Block.BODY = Block(BlockKind.BODY)
Block.ALL = Block(BlockKind.ALL)
Block.BODY_LATEST = Block(BlockKind.BODY_LATEST)
Block.BODY_OLDEST = Block(BlockKind.BODY_OLDEST)
Block.BODY_KEY_EVENTS = Block(BlockKind.BODY_KEY_EVENTS)
