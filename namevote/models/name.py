from datetime import datetime

from namevote.extensions import db


class Name(db.Model):
    __tablename__ = "names"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    submissions = db.relationship("Submission", backref="name_entry", lazy=True)
