import pytest

from namevote.services.moderation import (
    BLOCKED_WORD_MESSAGE,
    MODEL_EXACT_BLOCK_MESSAGE,
    MODEL_REJECT_MESSAGE,
    contains_blocked_word,
    find_blocked_word,
    get_device_info_rejection_error,
    get_device_name_rejection_error,
    get_model_rejection_error,
    is_model_name_rejected,
    normalize_text,
)


@pytest.mark.parametrize(
    "text",
    ["poda", "PODA", "p o d a", "Po da", "my\tpo\nda phone", "ｐｏｄａ", "Ｐ Ｏ Ｄ Ａ"],
)
def test_blocked_word_detected(text):
    assert contains_blocked_word(text)


@pytest.mark.parametrize("text", ["pod", "Pixel 7", "", None, "p-o-d-a"])
def test_blocked_word_not_detected(text):
    assert not contains_blocked_word(text)


def test_normalize_text_folds_width_case_and_whitespace():
    assert normalize_text("  Ｈｅｌｌｏ  Wor ld ") == "helloworld"
    assert normalize_text(None) == ""


def test_find_blocked_word_walks_nested_values():
    assert find_blocked_word({"details": {"brands": ["Chromium", "p o d a"]}})
    assert find_blocked_word({"details": {"n": 1}, "deviceName": "PoDa"})
    assert not find_blocked_word({"details": {"platform": "Linux"}})


def test_find_blocked_word_ignores_keys():
    assert not find_blocked_word({"poda": "fine"})


def test_find_blocked_word_stops_at_depth_limit():
    within = {"a": {"b": {"c": {"d": "poda"}}}}
    beyond = {"a": {"b": {"c": {"d": {"e": "poda"}}}}}

    assert find_blocked_word(within)
    assert not find_blocked_word(beyond)
    assert find_blocked_word(beyond, max_depth=5)


def test_model_rejection_rules():
    assert get_model_rejection_error("poda") == MODEL_EXACT_BLOCK_MESSAGE
    assert get_model_rejection_error("  PODA ") == MODEL_EXACT_BLOCK_MESSAGE
    assert get_model_rejection_error("Galaxy") == MODEL_REJECT_MESSAGE
    assert get_model_rejection_error("iPhone") is None
    assert get_model_rejection_error("Windows") is None
    assert get_model_rejection_error("iPhone 14") is None
    assert get_model_rejection_error("SM-G991B") is None
    assert get_model_rejection_error("Pixel 7") is None
    assert get_model_rejection_error("") is None
    assert get_model_rejection_error(None) is None


def test_is_model_name_rejected():
    assert is_model_name_rejected("Galaxy")
    assert not is_model_name_rejected("Pixel 7")


def test_device_name_rejection():
    assert get_device_name_rejection_error("P O D A's iPad") == BLOCKED_WORD_MESSAGE
    assert get_device_name_rejection_error("Anu's iPad") is None
    assert get_device_name_rejection_error(None) is None


def test_device_info_rejection():
    info = {"deviceName": "Phone", "details": {"platform": "po da OS"}}
    assert get_device_info_rejection_error(info) == BLOCKED_WORD_MESSAGE
    assert get_device_info_rejection_error({"details": {"platform": "Android"}}) is None
    assert get_device_info_rejection_error(["poda"]) is None
    assert get_device_info_rejection_error(None) is None
