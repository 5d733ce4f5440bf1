import json
import math
import re
import uuid

DEVICE_ID_MAX_LEN = 64
DEVICE_INFO_MAX_RAW_LEN = 8192
MAX_STRING_LEN = 500

UUID_V4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
FALLBACK_DEVICE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")

DETAIL_KEYS = frozenset(
    {
        "userAgent",
        "platform",
        "language",
        "timeZone",
        "screenWidth",
        "screenHeight",
        "brands",
        "mobile",
        "platformVersion",
    }
)
NUMERIC_DETAIL_KEYS = frozenset({"screenWidth", "screenHeight"})


class InvalidPayload(ValueError):
    """Raised when the posted device info cannot be accepted."""


def generate_device_id():
    return str(uuid.uuid4())


def is_valid_device_id(value):
    if not isinstance(value, str) or len(value) > DEVICE_ID_MAX_LEN:
        return False
    return bool(
        UUID_V4_PATTERN.fullmatch(value) or FALLBACK_DEVICE_ID_PATTERN.fullmatch(value)
    )


def clean_device_id(raw):
    """Return the trimmed device id, or None when it is missing or invalid.

    Non-string values (uploaded files, lists from repeated fields) are
    treated as missing.
    """
    if not isinstance(raw, str):
        return None
    device_id = raw.strip()
    if not device_id or not is_valid_device_id(device_id):
        return None
    return device_id


def parse_device_info(raw):
    if not raw:
        return {}
    if len(raw) > DEVICE_INFO_MAX_RAW_LEN:
        raise InvalidPayload("device info is too large")
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidPayload("device info is not valid JSON") from exc
    except RecursionError as exc:
        raise InvalidPayload("device info is nested too deeply") from exc
    if not isinstance(parsed, dict):
        return {}
    return parsed


def _to_str(value):
    if value is None:
        return ""
    if isinstance(value, bool):
        # Match the browser's rendering of booleans.
        text = "true" if value else "false"
    else:
        text = str(value)
    return text[:MAX_STRING_LEN]


def _to_finite_number(value):
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        # Integers past float range become Infinity in the browser too.
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip() or "0")
        except ValueError:
            return None
    elif value is None:
        number = 0
    else:
        return None
    if not math.isfinite(number):
        return None
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def sanitize_device_info(raw):
    sanitized = {}
    if isinstance(raw.get("deviceName"), str):
        sanitized["deviceName"] = _to_str(raw["deviceName"])
    if isinstance(raw.get("modelName"), str):
        sanitized["modelName"] = _to_str(raw["modelName"])

    details_raw = raw.get("details")
    if isinstance(details_raw, dict):
        details = {}
        for key, value in details_raw.items():
            if key not in DETAIL_KEYS:
                continue
            if key in NUMERIC_DETAIL_KEYS:
                number = _to_finite_number(value)
                if number is not None:
                    details[key] = number
            elif key == "mobile":
                if isinstance(value, bool):
                    details[key] = value
            else:
                details[key] = _to_str(value)
        sanitized["details"] = details

    return sanitized


def format_details(details):
    if not isinstance(details, dict):
        return "—"

    parts = []
    for key in ("platform", "language", "timeZone"):
        if details.get(key):
            parts.append(details[key])
    width = details.get("screenWidth")
    height = details.get("screenHeight")
    if width is not None and height is not None:
        parts.append(f"{width}×{height}")
    if details.get("brands"):
        parts.append(details["brands"])
    if details.get("mobile") is not None:
        parts.append("Mobile" if details["mobile"] else "Desktop")
    user_agent = details.get("userAgent")
    if user_agent:
        parts.append(user_agent[:60] + ("…" if len(user_agent) > 60 else ""))

    return " · ".join(parts) if parts else "—"
