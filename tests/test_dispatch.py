import pytest

from OpenDriveStream.context import ReadContext
from OpenDriveStream.dispatch import MANY, ONE_OR_MORE, OPTIONAL, REQUIRED, Cardinality, Child, Choice
from OpenDriveStream.errors import (
    DuplicateElement,
    MalformedMarkup,
    MissingElement,
    NestingTooDeep,
    UnexpectedChildElement,
)
from OpenDriveStream.events import Characters, EndElement, EventCursor, StartElement, eventsFromString


def leaf(tag, **attrs):
    return [StartElement(tag, attrs), EndElement(tag)]


def element(tag, *children, **attrs):
    events = [StartElement(tag, attrs)]
    for child in children:
        events.extend(child)
    events.append(EndElement(tag))
    return events


def open_context(events, max_depth=256):
    cursor = EventCursor(events, max_depth)
    start = cursor.nextStart()
    return ReadContext(cursor, start.name, start.attributes)


def value_of(read):
    return read.expectingNoChildElementsFor(read.attribute("v"))


def test_cardinality_flags():
    assert REQUIRED.required and not REQUIRED.repeats
    assert ONE_OR_MORE.required and ONE_OR_MORE.repeats
    assert not OPTIONAL.required and not OPTIONAL.repeats
    assert MANY.repeats and not MANY.required
    assert Cardinality("0..1") is OPTIONAL


def test_children_are_routed_by_tag():
    read = open_context(element("parent", leaf("a", v="1"), leaf("b", v="2")))
    found = read.children(Child("a", value_of), Child("b", value_of, REQUIRED))
    assert found == {"a": "1", "b": "2"}
    assert read.closed
    assert read.cursor.depth == 0


def test_absent_optional_child_is_none():
    read = open_context(element("parent"))
    assert read.children(Child("a", value_of))["a"] is None


def test_absent_required_child_fails():
    read = open_context(element("parent", leaf("a", v="1")))
    with pytest.raises(MissingElement) as info:
        read.children(Child("a", value_of), Child("b", value_of, REQUIRED))
    assert info.value.tag == "b"


@pytest.mark.parametrize("cardinality", [OPTIONAL, REQUIRED])
def test_singular_child_twice_fails(cardinality):
    read = open_context(element("parent", leaf("a", v="1"), leaf("a", v="2")))
    with pytest.raises(DuplicateElement) as info:
        read.children(Child("a", value_of, cardinality))
    assert info.value.tag == "a"


def test_repeated_children_keep_document_order():
    read = open_context(element("parent", leaf("a", v="3"), leaf("b", v="x"), leaf("a", v="1"), leaf("a", v="2")))
    found = read.children(Child("a", value_of, MANY), Child("b", value_of))
    assert found["a"] == ["3", "1", "2"]
    assert found["b"] == "x"


def test_absent_repeated_children_are_an_empty_list():
    read = open_context(element("parent"))
    assert read.children(Child("a", value_of, MANY))["a"] == []


def test_one_or_more_requires_one():
    read = open_context(element("parent"))
    with pytest.raises(MissingElement) as info:
        read.children(Child("a", value_of, ONE_OR_MORE))
    assert info.value.tag == "a"


def test_key_overrides_tag():
    read = open_context(element("parent", leaf("a", v="1")))
    assert read.children(Child("a", value_of, key="first"))["first"] == "1"


def test_unknown_subtree_is_skipped_without_affecting_siblings():
    unknown = element("future", element("deeper", leaf("a", v="nested"), leaf("b")), leaf("c"))
    read = open_context(element("parent", leaf("a", v="1"), unknown, leaf("b", v="2")))
    found = read.children(Child("a", value_of), Child("b", value_of))
    assert found == {"a": "1", "b": "2"}
    assert read.cursor.depth == 0


def test_character_data_between_children_is_ignored():
    events = [StartElement("parent"), Characters("\n  "), *leaf("a", v="1"), Characters("\n"), EndElement("parent")]
    read = open_context(events)
    assert read.children(Child("a", value_of)) == {"a": "1"}


def test_choice_takes_exactly_one_option():
    rule = Choice("shape", {"x": lambda r: "X", "y": lambda r: "Y"})
    read = open_context(element("parent", leaf("y")))
    assert read.children(rule)["shape"] == "Y"


def test_choice_missing_names_all_options():
    read = open_context(element("parent"))
    with pytest.raises(MissingElement) as info:
        read.children(Choice("shape", {"x": lambda r: "X", "y": lambda r: "Y"}))
    assert info.value.tag == "x|y"


def test_choice_with_two_options_present_fails():
    read = open_context(element("parent", leaf("x"), leaf("y")))
    with pytest.raises(DuplicateElement) as info:
        read.children(Choice("shape", {"x": lambda r: "X", "y": lambda r: "Y"}))
    assert info.value.tag == "y"


def test_handler_that_ignores_its_children_does_not_desync_the_cursor():
    read = open_context(element("parent", element("a", leaf("inner"), v="1"), leaf("b", v="2")))
    found = read.children(Child("a", lambda r: r.attribute("v")), Child("b", value_of))
    assert found == {"a": "1", "b": "2"}


def test_leaf_with_child_element_fails():
    read = open_context(element("parent", element("a", leaf("surprise"), v="1")))
    with pytest.raises(UnexpectedChildElement) as info:
        read.children(Child("a", value_of))
    assert info.value.tag == "surprise"
    assert info.value.parent == "a"


def test_text_collects_characters_and_skips_children():
    events = [StartElement("geo"), Characters("+proj="), *leaf("noise"), Characters("tmerc"), EndElement("geo")]
    assert open_context(events).text() == "+proj=tmerc"


def test_text_from_parser_end_event():
    read = open_context(eventsFromString("<geo><![CDATA[+proj=utm +zone=32]]></geo>"))
    assert read.text() == "+proj=utm +zone=32"


def test_nesting_limit_applies_inside_unknown_elements():
    depth = 50
    events = [StartElement("parent")] + [StartElement(f"n{i}") for i in range(depth)]
    events += [EndElement(f"n{i}") for i in reversed(range(depth))] + [EndElement("parent")]
    read = open_context(events, max_depth=20)
    with pytest.raises(NestingTooDeep) as info:
        read.children()
    assert info.value.limit == 20


def test_deep_unknown_nesting_within_limit_is_skipped_iteratively():
    depth = 5000
    events = [StartElement("parent")] + [StartElement("n")] * depth + [EndElement("n")] * depth
    events += leaf("a", v="ok") + [EndElement("parent")]
    read = open_context(events, max_depth=depth + 10)
    assert read.children(Child("a", value_of))["a"] == "ok"


def test_truncated_stream_fails():
    read = open_context([StartElement("parent"), *leaf("a", v="1")])
    with pytest.raises(MalformedMarkup):
        read.children(Child("a", value_of))


def test_end_before_any_start_fails():
    with pytest.raises(MalformedMarkup):
        open_context([EndElement("parent")])


def test_syntax_errors_are_wrapped():
    with pytest.raises(MalformedMarkup) as info:
        list(eventsFromString("<parent><a></parent>"))
    assert info.value.__cause__ is not None
