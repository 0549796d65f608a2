import io
import xml.etree.ElementTree as ET

from conftest import makeDocument, makeRoad

from OpenDriveStream import parseFile, parseString
from OpenDriveStream.events import Characters, EndElement, StartElement, _drain, eventsFromSource, eventsFromString

LATIN1_DOCUMENT = (
    '<?xml version="1.0" encoding="ISO-8859-1"?>'
    + makeDocument(makeRoad('id="5" junction="-1" length="100.0" name="Straße"'))
)


def test_text_ignores_the_declared_encoding():
    assert parseString(LATIN1_DOCUMENT).roads[0].name == "Straße"


def test_bytes_follow_the_declared_encoding():
    assert parseString(LATIN1_DOCUMENT.encode("iso-8859-1")).roads[0].name == "Straße"


def test_latin1_file(tmp_path):
    path = tmp_path / "latin1.xodr"
    path.write_bytes(LATIN1_DOCUMENT.encode("iso-8859-1"))
    assert parseFile(path).roads[0].name == "Straße"


def test_text_and_binary_streams():
    text = makeDocument(makeRoad())
    from_text = list(eventsFromSource(io.StringIO(text)))
    from_bytes = list(eventsFromSource(io.BytesIO(text.encode("utf-8"))))
    assert from_text == from_bytes == list(eventsFromString(text))


def test_event_sequence():
    events = list(eventsFromString('<a x="1"><b/>tail</a>'))
    assert events == [
        StartElement("a", {"x": "1"}),
        StartElement("b", {}),
        EndElement("b", None),
        EndElement("a", None),
    ]
    assert not any(isinstance(event, Characters) for event in events)


def test_finished_elements_are_detached_from_their_parent():
    parser = ET.XMLPullParser(events=("start", "end"))
    open_elements = []
    parser.feed("<OpenDRIVE>" + "<road id='1'><lanes/></road>" * 50)
    list(_drain(parser, open_elements))
    root = open_elements[0]
    assert root.tag == "OpenDRIVE"
    assert len(root) == 0
