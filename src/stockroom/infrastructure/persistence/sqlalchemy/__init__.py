"""SQLAlchemy persistence: models, repositories and schema setup."""
