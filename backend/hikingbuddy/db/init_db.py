"""
Database initialization script.
"""
from hikingbuddy.db.session import init_db

# Import all models so SQLAlchemy can register them
from hikingbuddy.models import User, Hike, HikeEntry  # noqa: F401

if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    print("Database initialized successfully!")
