"""Phone number normalization to E.164 for person identity."""

import phonenumbers


def normalize_phone(raw: str, default_region: str | None = None) -> str | None:
    """Parse and return E.164 form of the number, or None if invalid.

    Use default_region when the input has no leading + (e.g. "9435 1253"
    with default_region "SG"). If the number already includes a country
    code, default_region is ignored.
    """
    if not raw or not str(raw).strip():
        return None
    raw = str(raw).strip()
    try:
        parsed = phonenumbers.parse(raw, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def phone_key(raw: str, default_region: str | None = None) -> str:
    """Comparable form of a phone: E.164 when parseable, otherwise its digits."""
    normalized = normalize_phone(raw, default_region=default_region)
    if normalized is not None:
        return normalized
    return "".join(ch for ch in raw if ch.isdigit())
