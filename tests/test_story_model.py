from dataclasses import FrozenInstanceError

import pytest

from storyexport.document import (
    Bold,
    Heading,
    Image,
    Link,
    ListBlock,
    ListType,
    Paragraph,
    Separator,
    Story,
    UnknownBlock,
    YouTube,
    story_from_dict,
    story_to_dict,
)
from storyexport.utils.errors import StoryFormatError

EDITOR_STORY = {
    "title": "Night Train",
    "author_name": "R. Vale",
    "summary": "A short ride.",
    "content": {
        "blocks": [
            {"type": "heading", "text": "Departure"},
            {"type": "paragraph", "text": "The platform was empty."},
            {"type": "bold", "text": "Mind the gap"},
            {"type": "separator"},
            {"type": "list", "items": ["ticket", "coat"], "listType": "ordered"},
            {"type": "image", "caption": "Station clock"},
            {"type": "youtube", "url": "https://youtu.be/abc"},
            {"type": "link", "text": "Timetable", "url": "https://example.org/t"},
            {"type": "poll", "question": "Window or aisle?"},
        ]
    },
}


def test_story_from_dict_builds_every_variant() -> None:
    story = story_from_dict(EDITOR_STORY)
    assert story.title == "Night Train"
    assert story.author_name == "R. Vale"
    assert story.summary == "A short ride."
    assert story.blocks == (
        Heading("Departure"),
        Paragraph("The platform was empty."),
        Bold("Mind the gap"),
        Separator(),
        ListBlock(items=("ticket", "coat"), list_type=ListType.ORDERED),
        Image("Station clock"),
        YouTube("https://youtu.be/abc"),
        Link("Timetable", "https://example.org/t"),
        UnknownBlock(type="poll", data={"type": "poll", "question": "Window or aisle?"}),
    )


def test_absent_fields_fall_back() -> None:
    story = story_from_dict({"content": {"blocks": [{"type": "image"}, {"type": "list"}]}})
    assert story.title == ""
    assert story.author_name == ""
    assert story.summary is None
    image, lst = story.blocks
    assert image == Image(None)
    assert lst == ListBlock(items=None, list_type=ListType.UNORDERED)


def test_missing_content_means_no_blocks() -> None:
    story = story_from_dict({"title": "T", "author_name": "A"})
    assert story.content is None
    assert story.blocks == ()


def test_snake_case_list_type_accepted() -> None:
    story = story_from_dict({"content": {"blocks": [{"type": "list", "items": [], "list_type": "ordered"}]}})
    assert story.blocks[0].ordered  # type: ignore[union-attr]


@pytest.mark.parametrize(
    "data",
    [
        ["not", "a", "mapping"],
        {"content": "nope"},
        {"content": {"blocks": "nope"}},
        {"content": {"blocks": ["nope"]}},
    ],
)
def test_malformed_shapes_raise(data: object) -> None:
    with pytest.raises(StoryFormatError):
        story_from_dict(data)  # type: ignore[arg-type]


def test_story_is_immutable() -> None:
    story = Story(title="T", author_name="A")
    with pytest.raises(FrozenInstanceError):
        story.title = "U"  # type: ignore[misc]


def test_story_to_dict_restores_editor_shape() -> None:
    assert story_to_dict(story_from_dict(EDITOR_STORY)) == EDITOR_STORY
