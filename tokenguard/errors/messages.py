"""
Error Message Catalog
---------------------
Fixed, localized texts used in error payloads.

Exception-carried messages are passed through untouched; only the messages
the service writes itself (validation summary, generic internal error,
authentication fallback) are looked up here.
"""

from typing import Dict, List, Optional, Tuple

VALIDATION_FAILED = "validation_failed"
INTERNAL_ERROR = "internal_error"
AUTHENTICATION_REQUIRED = "authentication_required"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        VALIDATION_FAILED: "Request data is invalid. Check the validErrors field.",
        INTERNAL_ERROR: "An internal server error occurred.",
        AUTHENTICATION_REQUIRED: "Token is expired or missing.",
    },
    "ko": {
        VALIDATION_FAILED: "요청 데이터가 유효하지 않습니다. validErrors 필드를 확인하세요.",
        INTERNAL_ERROR: "서버 내부 오류가 발생했습니다.",
        AUTHENTICATION_REQUIRED: "토큰 정보가 만료되었거나 존재하지 않습니다.",
    },
}

DEFAULT_LOCALE = "en"


def get_message(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Look up a fixed message, falling back to English."""
    catalog = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    return catalog.get(key, MESSAGES[DEFAULT_LOCALE][key])


def _parse_accept_language(header: str) -> List[Tuple[str, float]]:
    languages = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        tag, _, params = part.partition(";")
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        languages.append((tag.strip().split("-")[0].lower(), quality))

    # sorted() is stable, so equal weights keep header order
    return sorted(languages, key=lambda item: item[1], reverse=True)


def resolve_locale(accept_language: Optional[str], default: str = DEFAULT_LOCALE) -> str:
    """
    Pick the catalog locale for a request.

    Args:
        accept_language: Raw Accept-Language header value (may be None)
        default: Locale used when the header names nothing we support

    Returns:
        A locale key present in MESSAGES
    """
    if accept_language:
        for language, quality in _parse_accept_language(accept_language):
            if quality > 0 and language in MESSAGES:
                return language
    return default if default in MESSAGES else DEFAULT_LOCALE
