"""Application-wide Flask extensions."""

from flask_sqlalchemy import SQLAlchemy


# A single SQLAlchemy handle shared across the application. The engine is
# configured in :func:`fruitstand.create_app` from the loaded settings.
# Records handed back by the store stay readable after commit, including
# ones that were just deleted.
db = SQLAlchemy(session_options={"expire_on_commit": False})
