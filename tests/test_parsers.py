import json
from transcript_pro.models.transcript import Segment
from transcript_pro.providers import parsers


def test_parse_xml_transcript():
    xml = '<transcript><text start="1.5" dur="2.0">Hello</text></transcript>'
    assert parsers.parse_xml(xml) == [Segment(text="Hello", start=1.5, duration=2.0)]


def test_parse_xml_defaults_and_entities():
    xml = (
        '<?xml version="1.0" encoding="utf-8" ?><transcript>'
        '<text start="abc">it&amp;#39;s</text>'
        '<text start="4" dur="1">   </text>'
        '</transcript>'
    )
    segments = parsers.parse_xml(xml)
    assert segments[0] == Segment(text="it's", start=0.0, duration=0.0)
    # blank nodes are kept here and dropped by the resolver
    assert len(segments) == 2
    assert parsers.drop_blank(segments) == [segments[0]]


def test_parse_xml_srv3():
    xml = '<timedtext format="3"><body><p t="1500" d="2500">Hi <s>there</s></p></body></timedtext>'
    assert parsers.parse_xml(xml) == [Segment(text="Hi there", start=1.5, duration=2.5)]


def test_parse_xml_garbage():
    assert parsers.parse_xml("<html><body>blocked") == []


def test_parse_vtt():
    vtt = (
        "WEBVTT\n\n"
        "00:00:01.000 --> 00:00:03.500\n"
        "<c>First</c> line\n"
        "continued\n\n"
        "00:04.000 --> 00:05.000\n"
        "Second\n"
    )
    assert parsers.parse_vtt(vtt) == [
        Segment(text="First line continued", start=1.0, duration=2.5),
        Segment(text="Second", start=4.0, duration=1.0),
    ]
    assert parsers.looks_like_vtt("\ufeffWEBVTT\n")


def test_flat_array():
    payload = [{"text": "Hi", "start": 0, "duration": 3}, {"text": "  ", "start": 3, "duration": 1}]
    assert parsers.parse_json(payload) == [Segment(text="Hi", start=0.0, duration=3.0)]


def test_flat_array_synonyms():
    payload = [{"caption": "One", "offset": 2.5}, {"content": "Two", "startTime": 5, "dur": 1.5}]
    assert parsers.parse_json(payload) == [
        Segment(text="One", start=2.5, duration=3.0),
        Segment(text="Two", start=5.0, duration=1.5),
    ]


def test_wrapper_object():
    payload = {"videoId": "x", "segments": [{"text": "A", "start": 1, "duration": 2}]}
    assert parsers.parse_json(payload) == [Segment(text="A", start=1.0, duration=2.0)]


def test_proxy_wrapped_events():
    inner = {
        "events": [
            {"tStartMs": 0, "dDurationMs": 1500, "segs": [{"utf8": "Hello"}, {"utf8": " world"}]},
            {"tStartMs": 1500, "dDurationMs": 500, "segs": [{"utf8": "\n"}]},
            {"tStartMs": 2000, "dDurationMs": 1000},
        ]
    }
    payload = {"contents": json.dumps(inner), "status": {"http_code": 200}}
    assert parsers.parse_json(payload) == [Segment(text="Hello world", start=0.0, duration=1.5)]


def test_full_text_fallback():
    assert parsers.parse_json({"text": "Line one\n\nLine two"}) == [
        Segment(text="Line one", start=0.0, duration=3.0),
        Segment(text="Line two", start=3.0, duration=3.0),
    ]


def test_full_text_sentences():
    segments = parsers.parse_json({"text": "First. Second! Third?"})
    assert [s.text for s in segments] == ["First.", "Second!", "Third?"]
    assert [s.start for s in segments] == [0.0, 3.0, 6.0]


def test_unknown_shapes():
    assert parsers.parse_json({"error": "not found"}) == []
    assert parsers.parse_json({"text": "   "}) == []
    assert parsers.parse_json([]) == []
    assert parsers.parse_json(None) == []


def test_events_with_non_string_text():
    payload = {"events": [{"tStartMs": 0, "dDurationMs": 1000, "segs": [{"utf8": 42}, {"utf8": " apples"}]}]}
    assert parsers.parse_json(payload) == [Segment(text="42 apples", start=0.0, duration=1.0)]


def test_empty_synonyms_fall_through():
    payload = [{"text": "", "transcript": "real", "start": 0, "offset": 7, "duration": 0}]
    assert parsers.parse_json(payload) == [Segment(text="real", start=7.0, duration=3.0)]

    payload = [{"text": "zero start", "start": 0, "dur": 0}]
    assert parsers.parse_json(payload) == [Segment(text="zero start", start=0.0, duration=3.0)]


def test_xml_sniffing_needs_leading_tag():
    assert parsers.looks_like_xml('  <?xml version="1.0"?><transcript></transcript>')
    assert parsers.looks_like_xml("<timedtext><body></body></timedtext>")
    assert not parsers.looks_like_xml('[{"text": "wrap it in a <text> element"}]')
    assert not parsers.looks_like_xml("<html><body>blocked</body></html>")
