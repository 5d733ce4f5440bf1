from datetime import datetime

from namevote.extensions import db


class Submission(db.Model):
    __tablename__ = "submissions"

    id = db.Column(db.Integer, primary_key=True)
    name_id = db.Column(db.Integer, db.ForeignKey("names.id"), nullable=False, index=True)
    device_id = db.Column(db.String(64), nullable=False)
    device_info = db.Column(db.JSON, nullable=False, default=dict)
    fingerprint_hash = db.Column(db.String(32), nullable=True)
    submitted_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        # One vote per device per name
        db.UniqueConstraint("device_id", "name_id", name="uq_submissions_device_name"),
        # One vote per browser fingerprint per name (NULL fingerprints never collide)
        db.UniqueConstraint(
            "fingerprint_hash", "name_id", name="uq_submissions_fingerprint_name"
        ),
    )
