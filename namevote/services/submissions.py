import hmac

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from namevote.extensions import db
from namevote.models import Name, Submission
from namevote.services.device import (
    InvalidPayload,
    clean_device_id,
    parse_device_info,
    sanitize_device_info,
)
from namevote.services.fingerprint import get_fingerprint_hash
from namevote.services.moderation import (
    get_device_info_rejection_error,
    get_device_name_rejection_error,
    get_model_rejection_error,
)

NAME_MAX_LEN = 200
# Largest value a signed 64-bit integer column can hold.
NAME_ID_MAX = 2**63 - 1

INVALID_SELECTION = "Please select a name."
INVALID_DEVICE_ID = "Device ID is missing or invalid. Please refresh and try again."
INVALID_PAYLOAD = "Invalid request."
UNAUTHORIZED = "Unauthorized."
DUPLICATE_VOTE = "You've already submitted this name from this device."
GENERIC_FAILURE = "Something went wrong. Please try again."
NAME_REQUIRED = "Enter a name."
NAME_TOO_LONG = f"Name must be {NAME_MAX_LEN} characters or fewer."
NAME_EXISTS = "That name already exists."


def _ok():
    return {"ok": True}


def _error(message):
    return {"ok": False, "error": message}


def is_admin_key(key):
    secret = current_app.config.get("ADMIN_SECRET") or ""
    if not secret or not isinstance(key, str):
        return False
    return hmac.compare_digest(key.encode("utf-8"), secret.encode("utf-8"))


def _parse_name_id(raw):
    if not isinstance(raw, str):
        return None
    raw = raw.strip()
    # ASCII digits only; int() would also take "1_0" and full-width digits.
    if not raw or not raw.isascii() or not raw.isdecimal():
        return None
    name_id = int(raw)
    return name_id if 0 < name_id <= NAME_ID_MAX else None


def _already_submitted(name_id, device_id, fingerprint_hash):
    if Submission.query.filter_by(device_id=device_id, name_id=name_id).first():
        return True
    if fingerprint_hash and Submission.query.filter_by(
        fingerprint_hash=fingerprint_hash, name_id=name_id
    ).first():
        return True
    return False


def submit_vote(form, headers):
    """Validate a vote form post and record it.

    Returns ``{"ok": True}`` or ``{"ok": False, "error": message}``; every
    failure is mapped to a user-facing message.
    """
    name_id = _parse_name_id(form.get("name_id"))
    if name_id is None:
        return _error(INVALID_SELECTION)

    device_id = clean_device_id(form.get("device_id"))
    if device_id is None:
        return _error(INVALID_DEVICE_ID)

    try:
        device_info = parse_device_info(form.get("device_info"))
    except InvalidPayload as exc:
        current_app.logger.info("Rejected device info from %s: %s", device_id, exc)
        return _error(INVALID_PAYLOAD)

    device_name = device_info.get("deviceName")
    model_name = device_info.get("modelName")
    rejection = (
        get_device_name_rejection_error(device_name if isinstance(device_name, str) else None)
        or get_model_rejection_error(model_name if isinstance(model_name, str) else None)
        or get_device_info_rejection_error(device_info)
    )
    if rejection:
        current_app.logger.info("Blocked submission from device %s", device_id)
        return _error(rejection)

    device_info = sanitize_device_info(device_info)
    fingerprint_hash = get_fingerprint_hash(
        headers, current_app.config.get("FINGERPRINT_SECRET") or None
    )

    try:
        if db.session.get(Name, name_id) is None:
            return _error(INVALID_SELECTION)

        # The unique constraints are authoritative; this check only gives a clearer message.
        if _already_submitted(name_id, device_id, fingerprint_hash):
            return _error(DUPLICATE_VOTE)

        db.session.add(
            Submission(
                name_id=name_id,
                device_id=device_id,
                device_info=device_info,
                fingerprint_hash=fingerprint_hash,
            )
        )
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        current_app.logger.info("Duplicate vote for name %s from device %s", name_id, device_id)
        return _error(DUPLICATE_VOTE)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("DB error while submitting vote")
        return _error(GENERIC_FAILURE)

    current_app.logger.info("Vote recorded for name %s", name_id)
    return _ok()


def add_name(form):
    if not is_admin_key(form.get("admin_key")):
        current_app.logger.warning("Add-name attempt with a bad admin key")
        return _error(UNAUTHORIZED)

    name = (form.get("name") or "").strip()
    if not name:
        return _error(NAME_REQUIRED)
    if len(name) > NAME_MAX_LEN:
        return _error(NAME_TOO_LONG)

    try:
        db.session.add(Name(name=name))
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return _error(NAME_EXISTS)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("DB error while adding name")
        return _error(GENERIC_FAILURE)

    current_app.logger.info("Name added: %s", name)
    return _ok()
