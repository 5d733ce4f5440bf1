from sqlalchemy import func

from namevote.extensions import db
from namevote.models import Name, Submission
from namevote.services.device import format_details


def list_names():
    return Name.query.order_by(Name.name).all()


def tally_votes():
    counts = dict(
        db.session.query(Submission.name_id, func.count(Submission.id))
        .group_by(Submission.name_id)
        .all()
    )

    rows = [{"name": name, "count": counts.get(name.id, 0)} for name in list_names()]
    rows.sort(key=lambda row: (-row["count"], row["name"].name.lower(), row["name"].id))
    return rows


def list_submissions():
    names_by_id = {name.id: name.name for name in list_names()}
    submissions = Submission.query.order_by(
        Submission.submitted_at.desc(), Submission.id.desc()
    ).all()

    rows = []
    for submission in submissions:
        info = submission.device_info if isinstance(submission.device_info, dict) else {}
        rows.append(
            {
                "submission": submission,
                "name": names_by_id.get(submission.name_id, "—"),
                "device_name": info.get("deviceName") or "—",
                "model_name": info.get("modelName") or "—",
                "details": format_details(info.get("details")),
            }
        )
    return rows
