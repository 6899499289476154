"""
Tests for the error code families.

Every code must carry a stable response code and a translation key
that resolves in every shipped catalog.
"""

import pytest

from exception_boundary.core.config import settings
from exception_boundary.domain.user.codes import UserErrorCode
from exception_boundary.domain.video.codes import VideoErrorCode
from exception_boundary.shared.errors.codes import ErrorCode, PlatformErrorCode
from exception_boundary.shared.i18n.translator import Translator

ALL_CODES = [*PlatformErrorCode, *UserErrorCode, *VideoErrorCode]


class TestResponseCodes:
    """Response codes are the API contract."""

    def test_response_code_is_enum_value(self) -> None:
        assert UserErrorCode.EMAIL_ALREADY_TAKEN.response_code == "USER_EMAIL_ALREADY_TAKEN"
        assert VideoErrorCode.THUMBNAIL_INVALID_DIMENSIONS.response_code == (
            "VIDEO_THUMBNAIL_INVALID_DIMENSIONS"
        )
        assert PlatformErrorCode.INTERNAL_SERVER_ERROR.response_code == "INTERNAL_SERVER_ERROR"

    def test_response_codes_are_unique_across_families(self) -> None:
        values = [code.response_code for code in ALL_CODES]
        assert len(values) == len(set(values))

    def test_every_family_is_an_error_code(self) -> None:
        for code in ALL_CODES:
            assert isinstance(code, ErrorCode)


class TestTranslationKeys:
    """Translation keys are what the boundary hands to the translator."""

    def test_known_keys(self) -> None:
        assert UserErrorCode.USER_NOT_FOUND.translation_key == "errors.user.not_found"
        assert VideoErrorCode.VIDEO_NOT_FOUND.translation_key == "errors.video.not_found"
        assert PlatformErrorCode.VALIDATION_FAILED.translation_key == (
            "errors.platform.validation_failed"
        )

    @pytest.mark.parametrize("locale", ["en", "es"])
    def test_every_key_is_translated(self, locale: str) -> None:
        translator = Translator(settings.lang_path, default_locale=locale, fallback_locale=locale)
        for code in ALL_CODES:
            text = translator.translate(code.translation_key, locale=locale)
            assert text != code.translation_key, f"{locale} misses {code.translation_key}"

    def test_family_without_override_has_no_key(self) -> None:
        class ReportErrorCode(ErrorCode):
            REPORT_EXPIRED = "REPORT_EXPIRED"

        assert ReportErrorCode.REPORT_EXPIRED.response_code == "REPORT_EXPIRED"
        with pytest.raises(NotImplementedError):
            ReportErrorCode.REPORT_EXPIRED.translation_key
