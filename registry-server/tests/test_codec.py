"""
Record encoding tests.

Stored bytes must be identical for identical records on every peer, so the
field order, separators and integer rendering are pinned here.
"""

import json

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from asset_registry.modules.assets import Asset, AssetDecodeError, AssetEncodeError
from asset_registry.modules.assets.codec import FIELD_ORDER, decode_asset, encode_asset


def make_asset(**overrides) -> Asset:
    fields = dict(
        dealer_id="DEALER001",
        msisdn="1234567890",
        mpin="1234",
        balance=10000,
        status="Active",
        trans_amount=5000,
        trans_type="Credit",
        remarks="Initial deposit",
    )
    fields.update(overrides)
    return Asset(**fields)


assets = st.builds(
    Asset,
    dealer_id=st.text(min_size=1),
    msisdn=st.text(),
    mpin=st.text(),
    balance=st.integers(),
    status=st.text(),
    trans_amount=st.integers(),
    trans_type=st.text(),
    remarks=st.text(),
)


class TestEncoding:

    def test_field_order_is_alphabetical(self):
        assert FIELD_ORDER == (
            "Balance", "DealerID", "Mpin", "Msisdn", "Remarks", "Status", "TransAmount", "TransType",
        )

    def test_exact_bytes(self):
        assert encode_asset(make_asset()) == (
            b'{"Balance":10000,"DealerID":"DEALER001","Mpin":"1234","Msisdn":"1234567890",'
            b'"Remarks":"Initial deposit","Status":"Active","TransAmount":5000,"TransType":"Credit"}'
        )

    def test_integers_are_decimal_and_strings_untouched(self):
        document = json.loads(encode_asset(make_asset(balance=-42, status="  active ", remarks="")))
        assert document["Balance"] == -42
        assert document["Status"] == "  active "
        assert document["Remarks"] == ""

    def test_non_ascii_is_stored_as_utf8(self):
        encoded = encode_asset(make_asset(remarks="首次充值"))
        assert "首次充值".encode("utf-8") in encoded

    @given(assets)
    @settings(max_examples=200)
    def test_decode_inverts_encode(self, asset):
        """
        PROPERTY: decode(encode(a)) == a for every record.
        """
        assert decode_asset(asset.dealer_id, encode_asset(asset)) == asset

    @given(assets)
    @settings(max_examples=50)
    def test_reencoding_is_stable(self, asset):
        encoded = encode_asset(asset)
        assert encode_asset(decode_asset(asset.dealer_id, encoded)) == encoded


class TestEncodeErrors:

    @pytest.mark.parametrize("field", ["remarks", "msisdn", "status"])
    def test_unencodable_string_raises_domain_error(self, field):
        with pytest.raises(AssetEncodeError) as excinfo:
            encode_asset(make_asset(**{field: "bad \ud800 text"}))
        assert excinfo.value.dealer_id == "DEALER001"
        assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)


class TestDecodeErrors:

    @pytest.mark.parametrize(
        "payload",
        [
            b"not json",
            b"",
            b"[1, 2, 3]",
            b'"DEALER001"',
            b"\xff\xfe\x00",
        ],
    )
    def test_malformed_payload(self, payload):
        with pytest.raises(AssetDecodeError) as excinfo:
            decode_asset("DEALER009", payload)
        assert excinfo.value.dealer_id == "DEALER009"

    def test_missing_field(self):
        document = json.loads(encode_asset(make_asset()))
        del document["Status"]
        with pytest.raises(AssetDecodeError, match="missing field Status"):
            decode_asset("DEALER001", json.dumps(document).encode())

    @pytest.mark.parametrize(
        "field,value",
        [
            ("Balance", "10000"),
            ("Balance", 10.5),
            ("Balance", True),
            ("TransAmount", None),
            ("Msisdn", 1234567890),
            ("Remarks", ["a"]),
        ],
    )
    def test_wrong_type(self, field, value):
        document = json.loads(encode_asset(make_asset()))
        document[field] = value
        with pytest.raises(AssetDecodeError, match=field):
            decode_asset("DEALER001", json.dumps(document).encode())

    def test_unknown_fields_are_ignored(self):
        document = json.loads(encode_asset(make_asset()))
        document["Extra"] = "x"
        assert decode_asset("DEALER001", json.dumps(document).encode()) == make_asset()

    def test_error_is_chained_to_parser_failure(self):
        with pytest.raises(AssetDecodeError) as excinfo:
            decode_asset("DEALER001", b"{")
        assert isinstance(excinfo.value.__cause__, ValueError)
