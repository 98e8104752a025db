"""stdlib json integration tests."""

import io
import json
from decimal import Decimal

import pytest

from pyepoch import Instant, NumeralParseError, UnsupportedPrecisionError
from pyepoch._errors import DocumentDecodeError
from pyepoch.integrations import json as epoch_json
from pyepoch.integrations.json import EpochJSONDecoder, EpochJSONEncoder
from tests.conftest import NEW_YEAR_2021


class TestDumps:
    def test_instant_is_bare_numeral(self):
        doc = {"at": Instant.from_unix(NEW_YEAR_2021, 123_456_789)}
        assert epoch_json.dumps(doc) == '{"at": 1609459200123}'

    def test_other_values_untouched(self, new_year):
        doc = {"at": new_year, "name": "x", "n": [1, 2.5, None]}
        assert epoch_json.dumps(doc) == '{"at": 1609459200000, "name": "x", "n": [1, 2.5, null]}'

    def test_kwargs_forwarded(self, new_year):
        assert epoch_json.dumps({"b": 1, "a": new_year}, sort_keys=True) == '{"a": 1609459200000, "b": 1}'

    def test_custom_codec(self, new_year, seconds_codec):
        assert epoch_json.dumps({"at": new_year}, codec=seconds_codec) == '{"at": 1609459200}'

    def test_codec_with_non_integer_numeral(self, new_year):
        class FractionalCodec:
            def encode(self, instant):
                return b"1609459200.5"

            def decode(self, data):
                raise NotImplementedError

        with pytest.raises(TypeError, match="FractionalCodec"):
            epoch_json.dumps({"at": new_year}, codec=FractionalCodec())

    def test_unserializable(self):
        with pytest.raises(TypeError):
            epoch_json.dumps({"x": object()})

    def test_encoder_class_with_stdlib(self, new_year):
        assert json.dumps([new_year], cls=EpochJSONEncoder) == "[1609459200000]"


class TestLoads:
    def test_decodes_named_fields(self):
        doc = epoch_json.loads('{"at": 1609459200123, "n": 1, "x": 1.5}', fields={"at"})
        assert doc == {"at": Instant.from_unix(NEW_YEAR_2021, 123_000_000), "n": 1, "x": 1.5}
        assert type(doc["n"]) is int
        assert type(doc["x"]) is float

    def test_fractional_seconds_literal(self):
        doc = epoch_json.loads('{"at": 1609459200.5}', fields=["at"])
        assert doc["at"] == Instant.from_unix(NEW_YEAR_2021, 500_000_000)

    def test_nested_objects(self):
        doc = epoch_json.loads(
            '{"events": [{"at": 1609459200}, {"at": 1609459200123456789}]}',
            fields={"at"},
        )
        assert [e["at"] for e in doc["events"]] == [
            Instant.from_unix(NEW_YEAR_2021),
            Instant.from_unix(NEW_YEAR_2021, 123_456_789),
        ]

    def test_top_level_numbers_restored(self):
        assert epoch_json.loads("[1, [2.5, 3]]", fields={"at"}) == [1, [2.5, 3]]
        assert epoch_json.loads("7", fields={"at"}) == 7

    def test_same_key_elsewhere_is_decoded(self):
        doc = epoch_json.loads('{"a": {"at": 5}, "b": 5}', fields={"at"})
        assert doc == {"a": {"at": Instant.from_unix(5)}, "b": 5}

    def test_null_stays_none(self):
        assert epoch_json.loads('{"at": null}', fields={"at"}) == {"at": None}

    def test_bytes_document(self):
        assert epoch_json.loads(b'{"at": 1609459200}', fields={"at"})["at"] == Instant.from_unix(
            NEW_YEAR_2021
        )

    def test_parse_float_honored(self):
        assert epoch_json.loads('{"x": 1.25}', fields=(), parse_float=Decimal) == {"x": Decimal("1.25")}

    def test_object_hook_honored(self):
        doc = epoch_json.loads('{"at": 5, "n": 1}', fields={"at"}, object_hook=lambda d: sorted(d))
        assert doc == ["at", "n"]

    def test_object_pairs_hook_honored(self):
        doc = epoch_json.loads('{"at": 5}', fields={"at"}, object_pairs_hook=list)
        assert doc == [("at", Instant.from_unix(5))]

    @pytest.mark.parametrize(
        ("document", "expected"),
        [
            ("[1, 2.5]", [1, 2.5]),
            ("7", 7),
            ("[[1], {\"n\": 2}]", [[1], {"n": 2}]),
        ],
    )
    def test_raw_decode_restores_numbers(self, document, expected):
        obj, end = EpochJSONDecoder(fields={"at"}).raw_decode(document)
        assert obj == expected
        assert end == len(document)
        assert [type(v) for v in (obj if isinstance(obj, list) else [obj])] == [
            type(v) for v in (expected if isinstance(expected, list) else [expected])
        ]

    def test_raw_decode_concatenated_documents(self):
        decoder = EpochJSONDecoder(fields={"at"})
        text = '{"at": 1609459200} 3 [4.5]'
        values = []
        idx = 0
        while idx < len(text):
            if text[idx] == " ":
                idx += 1
                continue
            obj, idx = decoder.raw_decode(text, idx)
            values.append(obj)
        assert values == [{"at": Instant.from_unix(NEW_YEAR_2021)}, 3, [4.5]]
        assert type(values[1]) is int
        assert type(values[2][0]) is float

    def test_decoder_class_with_stdlib(self):
        doc = json.loads('{"at": 1609459200}', cls=EpochJSONDecoder, fields={"at"})
        assert doc["at"] == Instant.from_unix(NEW_YEAR_2021)

    def test_round_trip(self):
        doc = {"at": Instant.from_unix(NEW_YEAR_2021, 123_000_000), "n": 3}
        assert epoch_json.loads(epoch_json.dumps(doc), fields={"at"}) == doc


class TestLoadsErrors:
    def test_unsupported_precision(self):
        with pytest.raises(DocumentDecodeError) as exc_info:
            epoch_json.loads('{"at": 160945920012}', fields={"at"})
        err = exc_info.value
        assert str(err) == "unexpected number of digits in timestamp"
        assert err.field == "at"
        assert isinstance(err.wrapped, UnsupportedPrecisionError)
        assert err.__cause__ is err.wrapped
        assert "'at'" in err.internal()

    def test_string_value(self):
        with pytest.raises(DocumentDecodeError) as exc_info:
            epoch_json.loads('{"at": "1609459200"}', fields={"at"})
        assert isinstance(exc_info.value.wrapped, NumeralParseError)
        assert str(exc_info.value) == "timestamp field is not a numeral"

    @pytest.mark.parametrize("value", ["true", "[1]", "{}"])
    def test_non_numeral_values(self, value):
        with pytest.raises(DocumentDecodeError):
            epoch_json.loads('{"at": %s}' % value, fields={"at"})

    def test_negative_numeral(self):
        with pytest.raises(DocumentDecodeError) as exc_info:
            epoch_json.loads('{"at": -5}', fields={"at"})
        assert isinstance(exc_info.value.wrapped, NumeralParseError)

    def test_malformed_document(self):
        with pytest.raises(json.JSONDecodeError):
            epoch_json.loads('{"at": }', fields={"at"})


class TestFileObjects:
    def test_dump_and_load(self, new_year):
        buf = io.StringIO()
        epoch_json.dump({"at": new_year}, buf)
        buf.seek(0)
        assert epoch_json.load(buf, fields={"at"}) == {"at": new_year}
