import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///namevote.db")
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")

    # Shared secret for the admin pages and the add-name action. Empty disables both.
    ADMIN_SECRET = os.getenv("ADMIN_SECRET", "")
    FINGERPRINT_SECRET = os.getenv("FINGERPRINT_SECRET", "")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Managed MySQL over TLS, e.g. DATABASE_URL=mysql+pymysql://user:pw@host/votes
    SQLALCHEMY_ENGINE_OPTIONS = (
        {"connect_args": {"ssl": {"ca": os.getenv("MYSQL_SSL_CA")}}}
        if os.getenv("MYSQL_SSL_CA")
        else {}
    )
