"""
Message Catalog Tests
---------------------
Test localized message lookup and Accept-Language resolution.
"""

import pytest

from tokenguard.errors import messages


class TestGetMessage:
    """Test catalog lookup."""

    def test_english(self):
        assert messages.get_message(messages.INTERNAL_ERROR, "en") == (
            "An internal server error occurred."
        )

    def test_korean(self):
        assert messages.get_message(messages.INTERNAL_ERROR, "ko") == (
            "서버 내부 오류가 발생했습니다."
        )

    def test_unknown_locale_falls_back_to_english(self):
        assert messages.get_message(messages.VALIDATION_FAILED, "de") == (
            messages.MESSAGES["en"][messages.VALIDATION_FAILED]
        )

    def test_catalogs_share_keys(self):
        assert set(messages.MESSAGES["ko"]) == set(messages.MESSAGES["en"])


class TestResolveLocale:
    """Test Accept-Language resolution."""

    @pytest.mark.parametrize(
        "header, expected",
        [
            (None, "en"),
            ("", "en"),
            ("ko", "ko"),
            ("ko-KR,ko;q=0.9,en;q=0.8", "ko"),
            ("en-US,en;q=0.9,ko;q=0.8", "en"),
            ("fr, ko;q=0.8", "ko"),
            ("en;q=0.5, ko;q=0.9", "ko"),
            ("ko;q=0, en;q=0.1", "en"),
            ("ko;q=abc, en;q=0.1", "en"),
            ("fr, de", "en"),
        ],
    )
    def test_resolve(self, header, expected):
        assert messages.resolve_locale(header) == expected

    def test_default_used_when_nothing_matches(self):
        assert messages.resolve_locale("fr", default="ko") == "ko"

    def test_unknown_default_falls_back(self):
        assert messages.resolve_locale(None, default="xx") == "en"

    def test_equal_weights_keep_header_order(self):
        assert messages.resolve_locale("ko, en") == "ko"
        assert messages.resolve_locale("en, ko") == "en"
