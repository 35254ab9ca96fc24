"""Tests for the format predicates."""

import pytest

from ruletag import predicates


class TestAlphaClasses:
    """Test the letter/digit class predicates."""

    def test_alpha(self):
        assert predicates.is_alpha("abcXYZ")
        assert not predicates.is_alpha("abc1")
        assert not predicates.is_alpha("")

    def test_alpha_numeric(self):
        assert predicates.is_alpha_numeric("abc123")
        assert not predicates.is_alpha_numeric("abc-1")

    def test_alpha_dash(self):
        assert predicates.is_alpha_dash("abc_1-2")
        assert not predicates.is_alpha_dash("a b")

    def test_alpha_space(self):
        assert predicates.is_alpha_space("John Doe_1")
        assert not predicates.is_alpha_space("a-b")


class TestNumbers:
    """Test numeric, float and boolean literals."""

    @pytest.mark.parametrize("value", ["123", "-5", "+7", "0"])
    def test_numeric_accepts_integers(self, value):
        assert predicates.is_numeric(value)

    @pytest.mark.parametrize("value", ["1.5", "abc", "", "1 2"])
    def test_numeric_rejects(self, value):
        assert not predicates.is_numeric(value)

    @pytest.mark.parametrize("value", ["1.5", "-0.5", "1e10", ".5", "3"])
    def test_float_accepts(self, value):
        assert predicates.is_float(value)

    @pytest.mark.parametrize("value", ["abc", "1.2.3", "", "."])
    def test_float_rejects(self, value):
        assert not predicates.is_float(value)

    def test_boolean_literal_set(self):
        for value in ["0", "1", "true", "false", "True", "False"]:
            assert predicates.is_boolean(value)
        assert not predicates.is_boolean("yes")
        assert not predicates.is_boolean("TRUE")


class TestNetworkFormats:
    """Test email, URL, MAC and IP predicates."""

    def test_email(self):
        assert predicates.is_email("jane@example.com")
        assert predicates.is_email("first.last+tag@sub.example.org")
        assert not predicates.is_email("foo@")
        assert not predicates.is_email("foo")
        assert not predicates.is_email("@example.com")

    def test_url(self):
        assert predicates.is_url("https://example.com/path?q=1")
        assert predicates.is_url("http://localhost:8000")
        assert predicates.is_url("ftp://192.168.0.1/file.txt")
        assert not predicates.is_url("example.com")
        assert not predicates.is_url("http://")
        assert not predicates.is_url("not a url")

    def test_mac_address(self):
        assert predicates.is_mac_address("01:23:45:67:89:ab")
        assert predicates.is_mac_address("01-23-45-67-89-AB")
        assert predicates.is_mac_address("0123.4567.89ab")
        assert not predicates.is_mac_address("01:23-45:67:89:ab")
        assert not predicates.is_mac_address("01:23:45:67:89")

    @pytest.mark.parametrize("value", ["192.168.0.1", "0.0.0.0", "255.255.255.255"])
    def test_ipv4_accepts(self, value):
        assert predicates.is_ipv4(value)

    @pytest.mark.parametrize("value", ["256.1.1.1", "1.2.3", "1.2.3.4.5", "a.b.c.d", "::1"])
    def test_ipv4_rejects(self, value):
        assert not predicates.is_ipv4(value)

    @pytest.mark.parametrize("value", ["2001:0db8:85a3:0000:0000:8a2e:0370:7334", "2001:db8::1", "::1", "::"])
    def test_ipv6_accepts_full_and_compressed(self, value):
        assert predicates.is_ipv6(value)

    @pytest.mark.parametrize("value", ["2001:db8:::1", "192.168.0.1", "fe80::1%eth0", "12345::1"])
    def test_ipv6_rejects(self, value):
        assert not predicates.is_ipv6(value)

    def test_ip_accepts_either_version(self):
        assert predicates.is_ip("10.0.0.1")
        assert predicates.is_ip("2001:db8::1")
        assert not predicates.is_ip("10.0.0")


class TestIdentifiers:
    """Test UUID, IMEI, ISBN and card number predicates."""

    UUID3 = "6fa459ea-ee8a-3ca4-894e-db77e160355e"
    UUID4 = "550e8400-e29b-41d4-a716-446655440000"
    UUID5 = "886313e1-3b8a-5372-9b90-0c9aee199e5d"

    def test_uuid_any_version(self):
        for value in (self.UUID3, self.UUID4, self.UUID5, self.UUID4.upper()):
            assert predicates.is_uuid(value)
        assert not predicates.is_uuid("550e8400e29b41d4a716446655440000")

    def test_uuid_version_nibble_must_match(self):
        assert predicates.is_uuid3(self.UUID3)
        assert not predicates.is_uuid3(self.UUID4)
        assert predicates.is_uuid4(self.UUID4)
        assert not predicates.is_uuid4(self.UUID5)
        assert predicates.is_uuid5(self.UUID5)
        assert not predicates.is_uuid5(self.UUID3)

    def test_imei(self):
        assert predicates.is_imei("490154203237518")
        assert not predicates.is_imei("12345")

    def test_isbn10_checksum(self):
        assert predicates.is_isbn10("0306406152")
        assert predicates.is_isbn10("0-306-40615-2")
        assert predicates.is_isbn10("080442957X")
        assert predicates.is_isbn10("080442957x")
        assert not predicates.is_isbn10("0306406153")
        assert not predicates.is_isbn10("030640615")

    def test_isbn13_checksum(self):
        assert predicates.is_isbn13("9780306406157")
        assert predicates.is_isbn13("978-0-306-40615-7")
        assert not predicates.is_isbn13("9780306406158")

    def test_credit_card_luhn(self):
        assert predicates.is_credit_card("4111111111111111")
        assert predicates.is_credit_card("4111 1111 1111 1111")
        assert not predicates.is_credit_card("4111111111111112")
        assert not predicates.is_credit_card("1234")


class TestGeoAndMisc:
    """Test coordinates, colors, JSON and phone numbers."""

    def test_latitude_range(self):
        assert predicates.is_latitude("-90")
        assert predicates.is_latitude("90.0")
        assert predicates.is_latitude("45.5")
        assert not predicates.is_latitude("90.1")
        assert not predicates.is_latitude("abc")

    def test_longitude_range(self):
        assert predicates.is_longitude("180")
        assert predicates.is_longitude("-179.9999")
        assert not predicates.is_longitude("181")

    def test_coordinate(self):
        assert predicates.is_coordinate("40.7128,-74.0060")
        assert predicates.is_coordinate("40.7128, -74.0060")
        assert not predicates.is_coordinate("91,0")
        assert not predicates.is_coordinate("40.7")

    def test_hex_color(self):
        assert predicates.is_hex_color("#fff")
        assert predicates.is_hex_color("#A1B2C3")
        assert predicates.is_hex_color("fff")
        assert not predicates.is_hex_color("#ggg")
        assert not predicates.is_hex_color("#ffff")

    def test_json(self):
        assert predicates.is_json('{"a": 1}')
        assert predicates.is_json("[1, 2]")
        assert not predicates.is_json("{bad")
        assert not predicates.is_json("")

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", "[1, NaN]", "{\"a\": Infinity}"])
    def test_json_rejects_non_standard_constants(self, value):
        assert not predicates.is_json(value)

    def test_json_rejects_deep_nesting(self):
        assert not predicates.is_json("[" * 100_000 + "]" * 100_000)

    def test_indonesian_phone_number(self):
        assert predicates.is_id_phone_number("081234567890")
        assert predicates.is_id_phone_number("+6281234567890")
        assert not predicates.is_id_phone_number("12345")
        assert not predicates.is_id_phone_number("0712345678")

    def test_is_in(self):
        assert predicates.is_in(["a", "b"], "b")
        assert not predicates.is_in(["a", "b"], "c")


class TestCssColorAndDates:
    """Test CSS colors and calendar dates."""

    @pytest.mark.parametrize("value", [
        "#909",
        "#00aaff",
        "#00aaff80",
        "rgb(255,122,122)",
        "rgb( 0, 0, 0 )",
        "rgb(100%, 50%, 0%)",
        "rgba(255, 0, 0, 0.5)",
        "hsl(120, 100%, 50%)",
        "hsla(120deg, 100%, 50%, .3)",
    ])
    def test_css_color_accepts(self, value):
        assert predicates.is_css_color(value)

    @pytest.mark.parametrize("value", ["red", "#ggg", "rgb(256,0,0)", "rgb(1,2)", "hsl(120, 100, 50)", ""])
    def test_css_color_rejects(self, value):
        assert not predicates.is_css_color(value)

    def test_date(self):
        assert predicates.is_date("2024-02-29")
        assert predicates.is_date("2024/12/31")
        assert not predicates.is_date("2023-02-29")
        assert not predicates.is_date("2024-13-01")
        assert not predicates.is_date("2024-01/01")
        assert not predicates.is_date("31-12-2024")

    def test_date_ddmmyy(self):
        assert predicates.is_date_ddmmyy("31-12-2024")
        assert predicates.is_date_ddmmyy("29/02/2024")
        assert not predicates.is_date_ddmmyy("31-04-2024")
        assert not predicates.is_date_ddmmyy("2024-12-31")
        assert not predicates.is_date_ddmmyy("31-12-24")
