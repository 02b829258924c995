import os

TESTING = os.getenv("FLASK_TESTING", "").lower() in ("1", "true", "yes")

# Heroku-style URLs use the postgres:// scheme, which SQLAlchemy no longer accepts
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///pocketcalc.db").replace("postgres://", "postgresql://", 1)
SQLALCHEMY_DATABASE_URI = DATABASE_URL

SECRET_KEY = os.getenv("SECRET_KEY")

# Calculator state is kept in the session cookie
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = "Lax"
PREFERRED_URL_SCHEME = os.getenv("PREFERRED_URL_SCHEME", "https")

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
