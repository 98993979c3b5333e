"""Initialize database tables."""
from sqlmodel import SQLModel

from codeai.models.conversation import Conversation  # noqa: F401
from codeai.models.message import Message  # noqa: F401
from codeai.models.project_file import ProjectFile  # noqa: F401
from codeai.db.config import engine


def init_db(target_engine=None):
    """Create all tables in the database."""
    print("[DB INIT] Creating all tables...")
    SQLModel.metadata.create_all(target_engine or engine)
    print("[DB INIT] Tables created successfully.")


if __name__ == "__main__":
    init_db()
