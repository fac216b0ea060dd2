import pytest
import requests
from unittest.mock import Mock, patch

from wordmatch.config import GameSettings
from wordmatch.dictionary_api import DefinitionSource, parse_definitions
from wordmatch.errors import ErrorKind, ParseError


def make_response(payload=None, status_code=200, json_error=None):
    response = Mock()
    response.status_code = status_code
    response.raise_for_status = Mock()
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def source():
    return DefinitionSource(GameSettings())


@pytest.fixture
def noun_verb_payload():
    return [{
        "word": "act",
        "meanings": [
            {"partOfSpeech": "noun", "definitions": [{"definition": "a thing", "example": "ignored"}]},
            {"partOfSpeech": "verb", "definitions": [{"definition": "to act"}, {"definition": "to do", "synonyms": []}]},
        ],
    }]


@pytest.mark.unit
def test_parse_groups_by_part_of_speech(noun_verb_payload):
    definitions, total = parse_definitions(noun_verb_payload)
    assert definitions == {"noun": ["a thing"], "verb": ["to act", "to do"]}
    assert total == 3


@pytest.mark.unit
def test_parse_merges_repeated_part_of_speech_and_skips_empty_meanings():
    payload = [{
        "meanings": [
            {"partOfSpeech": "noun", "definitions": [{"definition": "first"}]},
            {"partOfSpeech": "adjective", "definitions": []},
            {"partOfSpeech": "noun", "definitions": [{"definition": "second"}]},
        ]
    }]
    definitions, total = parse_definitions(payload)
    assert definitions == {"noun": ["first", "second"]}
    assert total == 2
    assert all(texts for texts in definitions.values())


@pytest.mark.unit
def test_parse_uses_only_first_entry():
    payload = [
        {"meanings": [{"partOfSpeech": "noun", "definitions": [{"definition": "from first"}]}]},
        {"meanings": [{"partOfSpeech": "verb", "definitions": [{"definition": "from second"}]}]},
    ]
    definitions, _ = parse_definitions(payload)
    assert definitions == {"noun": ["from first"]}


@pytest.mark.unit
@pytest.mark.parametrize("payload", [
    {"title": "No Definitions Found"},
    [],
    ["not an object"],
    [{"word": "x"}],
    [{"meanings": [{"definitions": [{"definition": "no pos"}]}]}],
    [{"meanings": [{"partOfSpeech": "noun"}]}],
    [{"meanings": [{"partOfSpeech": "noun", "definitions": [{"example": "no definition"}]}]}],
    [{"meanings": [{"partOfSpeech": "", "definitions": [{"definition": "blank pos"}]}]}],
])
def test_parse_rejects_malformed_shapes(payload):
    with pytest.raises(ParseError):
        parse_definitions(payload)


@pytest.mark.api
def test_fetch_definitions_success(source, noun_verb_payload):
    with patch('requests.get') as mock_get:
        mock_get.return_value = make_response(noun_verb_payload)
        result = source.fetch_definitions("act")

    assert result.ok
    assert result.value == {"noun": ["a thing"], "verb": ["to act", "to do"]}
    url = mock_get.call_args[0][0]
    assert url == "https://api.dictionaryapi.dev/api/v2/entries/en/act"
    assert mock_get.call_args[1]["timeout"] == (2.0, 2.0)


@pytest.mark.api
def test_fetch_definitions_insufficient(source):
    payload = [{"meanings": [{"partOfSpeech": "noun", "definitions": [{"definition": "one"}, {"definition": "two"}]}]}]
    with patch('requests.get') as mock_get:
        mock_get.return_value = make_response(payload)
        result = source.fetch_definitions("pair")

    assert result.error is ErrorKind.INSUFFICIENT_DATA
    assert result.value == {}


@pytest.mark.api
def test_fetch_definitions_respects_custom_minimum(noun_verb_payload):
    source = DefinitionSource(GameSettings(), min_definitions=4)
    with patch('requests.get') as mock_get:
        mock_get.return_value = make_response(noun_verb_payload)
        result = source.fetch_definitions("act")
    assert result.error is ErrorKind.INSUFFICIENT_DATA


@pytest.mark.api
def test_fetch_definitions_unparsable_body(source):
    with patch('requests.get') as mock_get:
        mock_get.return_value = make_response(json_error=ValueError("Expecting value"))
        result = source.fetch_definitions("garbage")

    assert result.error is ErrorKind.PARSE
    assert result.value == {}


@pytest.mark.api
def test_fetch_definitions_malformed_shape(source):
    with patch('requests.get') as mock_get:
        mock_get.return_value = make_response([{"meanings": "nope"}])
        result = source.fetch_definitions("odd")
    assert result.error is ErrorKind.PARSE
    assert result.value == {}


@pytest.mark.api
def test_fetch_definitions_not_found_is_insufficient(source):
    with patch('requests.get') as mock_get:
        mock_get.return_value = make_response({"title": "No Definitions Found"}, status_code=404)
        result = source.fetch_definitions("qwzx")
    assert result.error is ErrorKind.INSUFFICIENT_DATA
    assert result.value == {}


@pytest.mark.api
@pytest.mark.parametrize("error", [
    requests.ConnectionError("unreachable"),
    requests.Timeout("too slow"),
])
def test_fetch_definitions_transport_error(source, error):
    with patch('requests.get') as mock_get:
        mock_get.side_effect = error
        result = source.fetch_definitions("word")
    assert result.error is ErrorKind.TRANSPORT
    assert result.value == {}


@pytest.mark.api
def test_fetch_definitions_server_error(source):
    response = make_response(status_code=500)
    response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    with patch('requests.get') as mock_get:
        mock_get.return_value = response
        result = source.fetch_definitions("word")
    assert result.error is ErrorKind.TRANSPORT


@pytest.mark.api
def test_fetch_definitions_quotes_word():
    source = DefinitionSource(GameSettings(dictionary_api_url="http://dict.test/entries"))
    with patch('requests.get') as mock_get:
        mock_get.side_effect = requests.ConnectionError("offline")
        source.fetch_definitions("ice cream")
    assert mock_get.call_args[0][0] == "http://dict.test/entries/ice%20cream"


@pytest.mark.unit
def test_parse_keeps_definition_text_unchanged():
    payload = [{
        "meanings": [
            {"partOfSpeech": "noun", "definitions": [{"definition": " padded "}, {"definition": "   "}]},
            {"partOfSpeech": "verb", "definitions": [{"definition": "to act"}]},
        ]
    }]
    definitions, total = parse_definitions(payload)
    assert definitions == {"noun": [" padded ", "   "], "verb": ["to act"]}
    assert total == 3
