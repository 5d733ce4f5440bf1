"""Blocked-word and device model checks applied to vote submissions.

These helpers run on untrusted client input. Non-text values are
stringified before matching, so they never raise.
"""
import re
import unicodedata

MAX_INPUT_LEN = 1000
MAX_TREE_DEPTH = 4

BLOCKED_WORDS = ("poda",)
BLOCKED_WORD_MESSAGE = "Njan ninta thandha"
MODEL_EXACT_BLOCK_MESSAGE = "Poyi Tharathil Poyi kalikkada"
MODEL_REJECT_MESSAGE = "This device or model cannot submit."

# Text-only model names that are still allowed through.
ALLOWED_TEXT_MODELS = frozenset({"iphone", "mac", "linux", "windows"})

_WHITESPACE = re.compile(r"\s+")
_DIGIT = re.compile(r"\d")


def _safe_str(value):
    if value is None:
        return ""
    text = value if isinstance(value, str) else str(value)
    return text[:MAX_INPUT_LEN]


def normalize_text(value):
    """Fold width and case, and drop all whitespace.

    NFKC maps full-width letters onto ASCII so "ｐｏｄａ" and "P O D A"
    both normalize to "poda".
    """
    text = unicodedata.normalize("NFKC", _safe_str(value))
    return _WHITESPACE.sub("", text).casefold()


def contains_blocked_word(value):
    text = normalize_text(value)
    return any(word in text for word in BLOCKED_WORDS)


def find_blocked_word(value, max_depth=MAX_TREE_DEPTH, _depth=0):
    """Walk a decoded JSON value and report whether any leaf is blocked.

    Only values are inspected, never dict keys. Containers nested deeper
    than ``max_depth`` are skipped.
    """
    if isinstance(value, (str, int, float, bool)):
        return contains_blocked_word(value)
    if _depth >= max_depth:
        return False
    if isinstance(value, dict):
        children = value.values()
    elif isinstance(value, (list, tuple)):
        children = value
    else:
        return False
    return any(find_blocked_word(child, max_depth, _depth + 1) for child in children)


def _is_only_text(value):
    has_letter = any(char.isalpha() for char in value)
    return has_letter and not _DIGIT.search(value)


def get_model_rejection_error(model_name):
    model = _safe_str(model_name).strip()
    if not model:
        return None
    lowered = model.lower()
    if lowered == "poda":
        return MODEL_EXACT_BLOCK_MESSAGE
    if _is_only_text(model) and lowered not in ALLOWED_TEXT_MODELS:
        return MODEL_REJECT_MESSAGE
    return None


def is_model_name_rejected(model_name):
    return get_model_rejection_error(model_name) is not None


def get_device_name_rejection_error(device_name):
    if contains_blocked_word(device_name):
        return BLOCKED_WORD_MESSAGE
    return None


def get_device_info_rejection_error(device_info):
    if not isinstance(device_info, dict):
        return None
    if find_blocked_word(device_info):
        return BLOCKED_WORD_MESSAGE
    return None
