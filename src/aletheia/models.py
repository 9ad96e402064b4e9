# src/aletheia/models.py

"""Pydantic models for Guardian content API responses.

The API omits most keys unless the matching ``show-*`` parameter was sent, so
every leaf is optional. Keys are camelCase on the wire and snake_case here;
models accept either. Unknown keys are ignored so that new upstream fields do
not break decoding.
"""

from datetime import datetime
from typing import Annotated, Any, ClassVar, Literal, Optional, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Discriminator, field_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model with camelCase aliases for all API payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class User(ApiModel):
    """An editorial user who created or modified a block."""

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class Reference(ApiModel):
    """An external reference such as an ISBN or a MusicBrainz id."""

    id: Optional[str] = None
    type: Optional[str] = None


class Edition(ApiModel):
    """A regional front page of the site (UK, US, Australia, ...)."""

    id: Optional[str] = None
    web_title: Optional[str] = None
    web_url: Optional[str] = None
    api_url: Optional[str] = None
    code: Optional[str] = None
    path: Optional[str] = None
    edition: Optional[str] = None


class Section(ApiModel):
    """A site section, with the editions it appears in."""

    id: Optional[str] = None
    web_title: Optional[str] = None
    web_url: Optional[str] = None
    api_url: Optional[str] = None
    editions: Optional[list[Edition]] = None


class Tag(ApiModel):
    """A manually assigned tag (keyword, contributor, series, tone, ...)."""

    id: Optional[str] = None
    type: Optional[str] = None
    section_id: Optional[str] = None
    section_name: Optional[str] = None
    web_title: Optional[str] = None
    web_url: Optional[str] = None
    api_url: Optional[str] = None
    references: Optional[list[Reference]] = None
    description: Optional[str] = None
    bio: Optional[str] = None
    byline_image_url: Optional[str] = None
    byline_large_image_url: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_address: Optional[str] = None
    twitter_handle: Optional[str] = None
    tag_categories: Optional[list[str]] = None
    entity_ids: Optional[list[str]] = None
    paid_content_type: Optional[str] = None
    internal_name: Optional[str] = None


_FIELD_DATETIMES = {"last_modified", "comment_close_date"}


class Fields(ApiModel):
    """Display fields requested with ``show-fields``.

    Upstream sends most of these as strings; numbers and booleans are
    coerced to their string form so that every field has one type.
    """

    byline: Optional[str] = None
    short_url: Optional[str] = None
    trail_text: Optional[str] = None
    headline: Optional[str] = None
    body: Optional[str] = None
    body_text: Optional[str] = None
    last_modified: Optional[datetime] = None
    has_story_package: Optional[str] = None
    score: Optional[str] = None
    standfirst: Optional[str] = None
    show_in_related_content: Optional[str] = None
    thumbnail: Optional[str] = None
    wordcount: Optional[str] = None
    commentable: Optional[str] = None
    is_premoderated: Optional[str] = None
    allow_ugc: Optional[str] = None
    publication: Optional[str] = None
    internal_page_code: Optional[str] = None
    production_office: Optional[str] = None
    should_hide_adverts: Optional[str] = None
    live_blogging_now: Optional[str] = None
    comment_close_date: Optional[datetime] = None
    star_rating: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _scalar_to_str(cls, value: Any, info: pydantic.ValidationInfo) -> Any:
        if info.field_name in _FIELD_DATETIMES:
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


# --- Block element payloads ---


class AssetFields(ApiModel):
    """Metadata describing one asset (image crop, video encoding, ...)."""

    alt_text: Optional[str] = None
    aspect_ratio: Optional[str] = None
    caption: Optional[str] = None
    credit: Optional[str] = None
    display_credit: Optional[bool] = None
    photographer: Optional[str] = None
    source: Optional[str] = None
    secure_file: Optional[str] = None
    is_master: Optional[bool] = None
    width: Optional[int] = None
    height: Optional[int] = None
    size_in_bytes: Optional[int] = None
    duration_minutes: Optional[int] = None
    duration_seconds: Optional[int] = None
    still_image_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    embeddable: Optional[bool] = None
    media_id: Optional[str] = None
    image_type: Optional[str] = None
    role: Optional[str] = None


class Asset(ApiModel):
    """A file attached to a block element."""

    type: Optional[str] = None
    mime_type: Optional[str] = None
    file: Optional[str] = None
    type_data: Optional[AssetFields] = None


class TextElementFields(ApiModel):
    html: Optional[str] = None


class VideoElementFields(ApiModel):
    url: Optional[str] = None
    description: Optional[str] = None
    title: Optional[str] = None
    html: Optional[str] = None
    source: Optional[str] = None
    credit: Optional[str] = None
    caption: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None
    duration: Optional[int] = None
    content_auth_system: Optional[str] = None
    embeddable_url: Optional[str] = None
    is_mandatory: Optional[bool] = None
    role: Optional[str] = None


class TweetElementFields(ApiModel):
    source: Optional[str] = None
    url: Optional[str] = None
    id: Optional[str] = None
    html: Optional[str] = None
    original_url: Optional[str] = None
    role: Optional[str] = None


class ImageElementFields(ApiModel):
    caption: Optional[str] = None
    copyright: Optional[str] = None
    display_credit: Optional[bool] = None
    credit: Optional[str] = None
    source: Optional[str] = None
    photographer: Optional[str] = None
    alt: Optional[str] = None
    media_id: Optional[str] = None
    media_api_uri: Optional[str] = None
    suppliers_reference: Optional[str] = None
    image_type: Optional[str] = None
    role: Optional[str] = None


class AudioElementFields(ApiModel):
    html: Optional[str] = None
    source: Optional[str] = None
    description: Optional[str] = None
    title: Optional[str] = None
    credit: Optional[str] = None
    caption: Optional[str] = None
    duration_minutes: Optional[int] = None
    duration_seconds: Optional[int] = None
    clean: Optional[bool] = None
    explicit: Optional[bool] = None
    role: Optional[str] = None


class PullquoteElementFields(ApiModel):
    html: Optional[str] = None
    attribution: Optional[str] = None
    role: Optional[str] = None


class InteractiveElementFields(ApiModel):
    url: Optional[str] = None
    original_url: Optional[str] = None
    source: Optional[str] = None
    caption: Optional[str] = None
    alt: Optional[str] = None
    script_url: Optional[str] = None
    html: Optional[str] = None
    script_name: Optional[str] = None
    iframe_url: Optional[str] = None
    role: Optional[str] = None
    is_mandatory: Optional[bool] = None


class StandardElementFields(ApiModel):
    """Payload shared by map, document and table elements."""

    url: Optional[str] = None
    original_url: Optional[str] = None
    source: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    credit: Optional[str] = None
    caption: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    html: Optional[str] = None
    role: Optional[str] = None
    is_mandatory: Optional[bool] = None


class WitnessElementFields(ApiModel):
    url: Optional[str] = None
    original_url: Optional[str] = None
    witness_embed_type: Optional[str] = None
    media_id: Optional[str] = None
    source: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    author_name: Optional[str] = None
    author_username: Optional[str] = None
    author_witness_profile_url: Optional[str] = None
    author_guardian_profile_url: Optional[str] = None
    caption: Optional[str] = None
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    html: Optional[str] = None
    api_url: Optional[str] = None
    photographer: Optional[str] = None
    date_created: Optional[datetime] = None
    youtube_url: Optional[str] = None
    youtube_title: Optional[str] = None
    role: Optional[str] = None


class RichLinkElementFields(ApiModel):
    url: Optional[str] = None
    original_url: Optional[str] = None
    link_text: Optional[str] = None
    link_prefix: Optional[str] = None
    role: Optional[str] = None


class MembershipElementFields(ApiModel):
    original_url: Optional[str] = None
    link_text: Optional[str] = None
    link_prefix: Optional[str] = None
    title: Optional[str] = None
    venue: Optional[str] = None
    location: Optional[str] = None
    identifier: Optional[str] = None
    image: Optional[str] = None
    price: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    role: Optional[str] = None


class EmbedElementFields(ApiModel):
    html: Optional[str] = None
    safe_embed_code: Optional[bool] = None
    alt: Optional[str] = None
    caption: Optional[str] = None
    is_mandatory: Optional[bool] = None
    role: Optional[str] = None


class InstagramElementFields(ApiModel):
    original_url: Optional[str] = None
    title: Optional[str] = None
    source: Optional[str] = None
    author_url: Optional[str] = None
    author_username: Optional[str] = None
    html: Optional[str] = None
    width: Optional[int] = None
    alt: Optional[str] = None
    caption: Optional[str] = None
    role: Optional[str] = None


class CommentElementFields(ApiModel):
    source: Optional[str] = None
    discussion_key: Optional[str] = None
    comment_url: Optional[str] = None
    original_url: Optional[str] = None
    source_url: Optional[str] = None
    discussion_url: Optional[str] = None
    author_url: Optional[str] = None
    html: Optional[str] = None
    author_name: Optional[str] = None
    comment_id: Optional[int] = None
    role: Optional[str] = None


class VineElementFields(ApiModel):
    original_url: Optional[str] = None
    title: Optional[str] = None
    source: Optional[str] = None
    author_url: Optional[str] = None
    author_username: Optional[str] = None
    html: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    alt: Optional[str] = None
    caption: Optional[str] = None
    role: Optional[str] = None


class ContentAtomElementFields(ApiModel):
    atom_id: Optional[str] = None
    atom_type: Optional[str] = None
    role: Optional[str] = None
    is_mandatory: Optional[bool] = None


class CodeElementFields(ApiModel):
    html: Optional[str] = None
    language: Optional[str] = None


# --- Block elements ---


class BaseElement(ApiModel):
    """Fields common to every block element.

    Subclasses name the attribute holding their payload in ``payload_field``;
    ``type_data`` returns it regardless of the element type.
    """

    payload_field: ClassVar[Optional[str]] = None

    assets: list[Asset] = []

    @property
    def type_data(self) -> Optional[ApiModel]:
        if self.payload_field is None:
            return None
        return getattr(self, self.payload_field)


class TextElement(BaseElement):
    payload_field: ClassVar[str] = "text_type_data"
    type: Literal["text"] = "text"
    text_type_data: Optional[TextElementFields] = None


class VideoElement(BaseElement):
    payload_field: ClassVar[str] = "video_type_data"
    type: Literal["video"] = "video"
    video_type_data: Optional[VideoElementFields] = None


class TweetElement(BaseElement):
    payload_field: ClassVar[str] = "tweet_type_data"
    type: Literal["tweet"] = "tweet"
    tweet_type_data: Optional[TweetElementFields] = None


class ImageElement(BaseElement):
    payload_field: ClassVar[str] = "image_type_data"
    type: Literal["image"] = "image"
    image_type_data: Optional[ImageElementFields] = None


class AudioElement(BaseElement):
    payload_field: ClassVar[str] = "audio_type_data"
    type: Literal["audio"] = "audio"
    audio_type_data: Optional[AudioElementFields] = None


class PullquoteElement(BaseElement):
    payload_field: ClassVar[str] = "pullquote_type_data"
    type: Literal["pullquote"] = "pullquote"
    pullquote_type_data: Optional[PullquoteElementFields] = None


class InteractiveElement(BaseElement):
    payload_field: ClassVar[str] = "interactive_type_data"
    type: Literal["interactive"] = "interactive"
    interactive_type_data: Optional[InteractiveElementFields] = None


class MapElement(BaseElement):
    payload_field: ClassVar[str] = "map_type_data"
    type: Literal["map"] = "map"
    map_type_data: Optional[StandardElementFields] = None


class DocumentElement(BaseElement):
    payload_field: ClassVar[str] = "document_type_data"
    type: Literal["document"] = "document"
    document_type_data: Optional[StandardElementFields] = None


class TableElement(BaseElement):
    payload_field: ClassVar[str] = "table_type_data"
    type: Literal["table"] = "table"
    table_type_data: Optional[StandardElementFields] = None


class WitnessElement(BaseElement):
    payload_field: ClassVar[str] = "witness_type_data"
    type: Literal["witness"] = "witness"
    witness_type_data: Optional[WitnessElementFields] = None


class RichLinkElement(BaseElement):
    payload_field: ClassVar[str] = "rich_link_type_data"
    type: Literal["rich-link"] = "rich-link"
    rich_link_type_data: Optional[RichLinkElementFields] = None


class MembershipElement(BaseElement):
    payload_field: ClassVar[str] = "membership_type_data"
    type: Literal["membership"] = "membership"
    membership_type_data: Optional[MembershipElementFields] = None


class EmbedElement(BaseElement):
    payload_field: ClassVar[str] = "embed_type_data"
    type: Literal["embed"] = "embed"
    embed_type_data: Optional[EmbedElementFields] = None


class InstagramElement(BaseElement):
    payload_field: ClassVar[str] = "instagram_type_data"
    type: Literal["instagram"] = "instagram"
    instagram_type_data: Optional[InstagramElementFields] = None


class CommentElement(BaseElement):
    payload_field: ClassVar[str] = "comment_type_data"
    type: Literal["comment"] = "comment"
    comment_type_data: Optional[CommentElementFields] = None


class VineElement(BaseElement):
    payload_field: ClassVar[str] = "vine_type_data"
    type: Literal["vine"] = "vine"
    vine_type_data: Optional[VineElementFields] = None


class ContentAtomElement(BaseElement):
    payload_field: ClassVar[str] = "content_atom_type_data"
    type: Literal["contentatom"] = "contentatom"
    content_atom_type_data: Optional[ContentAtomElementFields] = None


class CodeElement(BaseElement):
    payload_field: ClassVar[str] = "code_type_data"
    type: Literal["code"] = "code"
    code_type_data: Optional[CodeElementFields] = None


class UnknownElement(BaseElement):
    """An element whose type token this client does not model.

    The raw payload is kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None


_ELEMENT_TYPES: dict[str, type[BaseElement]] = {
    "text": TextElement,
    "video": VideoElement,
    "tweet": TweetElement,
    "image": ImageElement,
    "audio": AudioElement,
    "pullquote": PullquoteElement,
    "interactive": InteractiveElement,
    "map": MapElement,
    "document": DocumentElement,
    "table": TableElement,
    "witness": WitnessElement,
    "rich-link": RichLinkElement,
    "membership": MembershipElement,
    "embed": EmbedElement,
    "instagram": InstagramElement,
    "comment": CommentElement,
    "vine": VineElement,
    "contentatom": ContentAtomElement,
    "code": CodeElement,
}


def _element_discriminator(value: Any) -> str:
    """Pick the union arm for a raw dict or an already-built element."""
    if isinstance(value, dict):
        token = value.get("type")
    else:
        token = getattr(value, "type", None)
    return token if token in _ELEMENT_TYPES else "unknown"


BlockElement = Annotated[
    Union[
        tuple(
            Annotated[model, pydantic.Tag(token)]
            for token, model in _ELEMENT_TYPES.items()
        )
        + (Annotated[UnknownElement, pydantic.Tag("unknown")],)
    ],
    Discriminator(_element_discriminator),
]
"""A block element, decoded into the model matching its ``type`` token."""


class BlockAttributes(ApiModel):
    key_event: Optional[bool] = None
    summary: Optional[bool] = None
    title: Optional[str] = None
    pinned: Optional[bool] = None


class Block(ApiModel):
    """One unit of body content, e.g. a single liveblog update."""

    id: Optional[str] = None
    body_html: Optional[str] = None
    body_text_summary: Optional[str] = None
    title: Optional[str] = None
    attributes: Optional[BlockAttributes] = None
    published: Optional[bool] = None
    created_date: Optional[datetime] = None
    first_published_date: Optional[datetime] = None
    published_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None
    contributors: Optional[list[str]] = None
    created_by: Optional[User] = None
    last_modified_by: Optional[User] = None
    elements: Optional[list[BlockElement]] = None


class Blocks(ApiModel):
    """Blocks requested with ``show-blocks``."""

    main: Optional[Block] = None
    body: Optional[list[Block]] = None
    total_body_blocks: Optional[int] = None
    requested_body_blocks: Optional[dict[str, list[Block]]] = None


class SearchResult(ApiModel):
    """One item of a listing.

    Content, tag, section and edition listings all decode into this model;
    attributes that a given listing does not send stay ``None``.
    """

    id: Optional[str] = None
    type: Optional[str] = None
    section_id: Optional[str] = None
    section_name: Optional[str] = None
    web_publication_date: Optional[datetime] = None
    web_title: Optional[str] = None
    web_url: Optional[str] = None
    api_url: Optional[str] = None
    is_hosted: Optional[bool] = None
    pillar_id: Optional[str] = None
    pillar_name: Optional[str] = None
    fields: Optional[Fields] = None
    tags: Optional[list[Tag]] = None
    section: Optional[Section] = None
    blocks: Optional[Blocks] = None
    references: Optional[list[Reference]] = None
    editions: Optional[list[Edition]] = None
    code: Optional[str] = None
    path: Optional[str] = None
    edition: Optional[str] = None


class SearchResponse(ApiModel):
    """The ``response`` payload: pagination metadata and results."""

    status: Optional[str] = None
    user_tier: Optional[str] = None
    total: Optional[int] = None
    start_index: Optional[int] = None
    page_size: Optional[int] = None
    current_page: Optional[int] = None
    pages: Optional[int] = None
    order_by: Optional[str] = None
    results: Optional[list[SearchResult]] = None
    message: Optional[str] = None
    """Set together with ``status == "error"`` when a request is rejected."""

    content: Optional[SearchResult] = None
    """The item returned by the single-item endpoint for a content path."""

    tag: Optional[Tag] = None
    section: Optional[Section] = None
    edition: Optional[Edition] = None
    related_content: Optional[list[SearchResult]] = None
    most_viewed: Optional[list[SearchResult]] = None
    editors_picks: Optional[list[SearchResult]] = None


class ResponseEnvelope(ApiModel):
    """Top-level JSON object returned by every endpoint."""

    message: Optional[str] = None
    response: Optional[SearchResponse] = None
