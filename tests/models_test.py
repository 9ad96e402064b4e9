"""Tests for the response models."""

import json
from datetime import datetime, timezone

from aletheia.models import (
    Fields,
    ImageElement,
    ResponseEnvelope,
    SearchResponse,
    SearchResult,
    StandardElementFields,
    TableElement,
    TextElement,
    TweetElement,
    UnknownElement,
)


class TestEnvelope:
    """Tests for ResponseEnvelope decoding."""

    def test_decode_search_payload(self, sample_search_payload):
        """Test a full search payload decodes with camelCase keys."""
        envelope = ResponseEnvelope.model_validate(sample_search_payload)

        assert envelope.message is None
        response = envelope.response
        assert response.user_tier == "developer"
        assert response.start_index == 1
        assert response.page_size == 10
        assert response.order_by == "newest"

        first = response.results[0]
        assert first.section_id == "politics"
        assert first.is_hosted is False
        assert first.pillar_name == "News"
        assert first.web_publication_date == datetime(
            2024, 7, 5, 6, 0, tzinfo=timezone.utc
        )
        assert first.tags[0].type == "keyword"

    def test_missing_show_parameters_leave_containers_empty(
        self, sample_search_payload
    ):
        """Test results without show-* data have no nested containers."""
        envelope = ResponseEnvelope.model_validate(sample_search_payload)
        second = envelope.response.results[1]

        assert second.fields is None
        assert second.tags is None
        assert second.section is None
        assert second.blocks is None

    def test_decode_error_message(self):
        """Test a top-level message decodes without a payload."""
        envelope = ResponseEnvelope.model_validate_json(b'{"message": "Unauthorized"}')
        assert envelope.message == "Unauthorized"
        assert envelope.response is None

    def test_unknown_keys_are_ignored(self):
        """Test new upstream keys do not break decoding."""
        envelope = ResponseEnvelope.model_validate(
            {
                "response": {
                    "status": "ok",
                    "brandNewCounter": 7,
                    "results": [{"id": "a", "futureFlag": True}],
                },
                "trace": "abc",
            }
        )
        assert envelope.response.results[0].id == "a"

    def test_every_leaf_is_optional(self):
        """Test an empty result decodes."""
        result = SearchResult.model_validate({})
        assert result.id is None
        assert result.web_publication_date is None

    def test_populate_by_field_name(self):
        """Test models can be built with snake_case names."""
        response = SearchResponse(status="ok", current_page=2)
        assert response.current_page == 2

    def test_round_trip_through_json(self, sample_item_payload):
        """Test dumping by alias yields the decoded wire shape back."""
        envelope = ResponseEnvelope.model_validate(sample_item_payload)

        dumped = envelope.model_dump_json(by_alias=True, exclude_none=True)
        again = ResponseEnvelope.model_validate_json(dumped)

        assert again.model_dump() == envelope.model_dump()
        assert "imageTypeData" in json.loads(dumped)["response"]["content"]["blocks"][
            "main"
        ]["elements"][0]


class TestListings:
    """Tests for non-content listings decoding into SearchResult."""

    def test_sections_listing_with_editions(self):
        """Test a sections result carries its editions."""
        response = SearchResponse.model_validate(
            {
                "status": "ok",
                "results": [
                    {
                        "id": "books",
                        "webTitle": "Books",
                        "webUrl": "https://www.theguardian.com/books",
                        "apiUrl": "https://content.guardianapis.com/books",
                        "editions": [
                            {"id": "books", "code": "default"},
                            {"id": "uk/books", "code": "uk"},
                        ],
                    }
                ],
            }
        )
        editions = response.results[0].editions
        assert [edition.code for edition in editions] == ["default", "uk"]

    def test_editions_listing(self):
        """Test an editions result keeps path and edition."""
        result = SearchResult.model_validate(
            {
                "id": "au",
                "path": "au",
                "edition": "AU",
                "webTitle": "new guardian australia front page",
            }
        )
        assert result.path == "au"
        assert result.edition == "AU"

    def test_single_tag_item(self):
        """Test the single-item endpoint for a tag path."""
        response = SearchResponse.model_validate(
            {
                "status": "ok",
                "tag": {
                    "id": "profile/reporter",
                    "type": "contributor",
                    "firstName": "Ada",
                    "lastName": "Reporter",
                    "bylineImageUrl": "https://i.guim.co.uk/a.png",
                },
                "results": [],
            }
        )
        assert response.tag.first_name == "Ada"
        assert response.tag.byline_image_url.endswith("a.png")
        assert response.results == []


class TestFields:
    """Tests for the show-fields bag."""

    def test_all_fields_optional(self):
        """Test an empty bag decodes."""
        assert Fields.model_validate({}) == Fields()

    def test_scalars_coerced_to_strings(self):
        """Test numbers and booleans become strings."""
        fields = Fields.model_validate(
            {"wordcount": 812, "isPremoderated": False, "starRating": 4, "score": 1.5}
        )
        assert fields.wordcount == "812"
        assert fields.is_premoderated == "false"
        assert fields.star_rating == "4"
        assert fields.score == "1.5"

    def test_datetimes_parsed(self):
        """Test lastModified and commentCloseDate are datetimes."""
        fields = Fields.model_validate(
            {
                "lastModified": "2024-07-05T09:12:00Z",
                "commentCloseDate": "2024-07-08T09:12:00Z",
            }
        )
        assert fields.last_modified.tzinfo is not None
        assert fields.comment_close_date.day == 8


class TestBlockElements:
    """Tests for the block element tagged union."""

    def test_elements_decode_by_type(self, sample_item_payload):
        """Test each element decodes into its own model."""
        envelope = ResponseEnvelope.model_validate(sample_item_payload)
        blocks = envelope.response.content.blocks

        main_element = blocks.main.elements[0]
        assert isinstance(main_element, ImageElement)
        assert main_element.image_type_data.credit == "Photograph: Agency"
        assert main_element.assets[0].type_data.is_master is True
        assert main_element.assets[0].mime_type == "image/jpeg"

        body_elements = blocks.body[0].elements
        assert isinstance(body_elements[0], TextElement)
        assert body_elements[0].type_data.html == "<p>Polls have closed.</p>"
        assert isinstance(body_elements[1], TweetElement)
        assert body_elements[1].tweet_type_data.id == "1"

    def test_unknown_element_type_is_kept(self, sample_item_payload):
        """Test an unmodelled element type decodes into UnknownElement."""
        envelope = ResponseEnvelope.model_validate(sample_item_payload)
        element = envelope.response.content.blocks.body[0].elements[2]

        assert isinstance(element, UnknownElement)
        assert element.type == "hologram"
        assert element.type_data is None
        assert element.model_extra["hologramTypeData"] == {"depth": 3}

    def test_element_without_type_is_unknown(self):
        """Test an element missing its type token still decodes."""
        payload = {"main": {"elements": [{"assets": []}]}}
        block = ResponseEnvelope.model_validate(
            {"response": {"content": {"blocks": payload}}}
        ).response.content.blocks.main
        assert isinstance(block.elements[0], UnknownElement)

    def test_shared_payload_shape(self):
        """Test table elements use the standard payload shape."""
        block = ResponseEnvelope.model_validate(
            {
                "response": {
                    "content": {
                        "blocks": {
                            "main": {
                                "elements": [
                                    {
                                        "type": "table",
                                        "tableTypeData": {"html": "<table></table>"},
                                    }
                                ]
                            }
                        }
                    }
                }
            }
        ).response.content.blocks.main
        element = block.elements[0]
        assert isinstance(element, TableElement)
        assert isinstance(element.type_data, StandardElementFields)
        assert element.assets == []

    def test_block_metadata(self, sample_item_payload):
        """Test block attributes, contributors and dates."""
        envelope = ResponseEnvelope.model_validate(sample_item_payload)
        blocks = envelope.response.content.blocks
        block = blocks.body[0]

        assert block.title == "Polls close"
        assert block.attributes.key_event is True
        assert block.contributors == ["profile/reporter"]
        assert block.published_date.hour == 18
        assert blocks.total_body_blocks == 1

    def test_section_with_editions_on_content(self, sample_item_payload):
        """Test show-section data on a content item."""
        envelope = ResponseEnvelope.model_validate(sample_item_payload)
        section = envelope.response.content.section
        assert section.web_title == "World news"
        assert section.editions[0].code == "default"
