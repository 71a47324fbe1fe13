"""
Database URL resolution from environment configuration.

Kept free of engine side effects so Alembic and scripts can import it.
"""
import os


def database_url_from_env() -> str:
    # If DATABASE_URL is explicitly set, use it
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    # Otherwise, generate from individual components (all must be set)
    db_user = os.getenv("DB_USER")
    db_password = os.getenv("DB_PASS")
    db_host = os.getenv("DB_HOST")
    db_port = os.getenv("DB_PORT")
    db_name = os.getenv("DB_NAME")

    if not all([db_user, db_password, db_host, db_port, db_name]):
        missing = []
        if not db_user: missing.append("DB_USER")
        if not db_password: missing.append("DB_PASS")
        if not db_host: missing.append("DB_HOST")
        if not db_port: missing.append("DB_PORT")
        if not db_name: missing.append("DB_NAME")
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"
