import threading
from datetime import timedelta

import pytest
from sqlmodel import Session, SQLModel, create_engine

import codeai.models  # noqa: F401
from codeai.db.config import enable_sqlite_foreign_keys
from codeai.models.message import MessageRole
from codeai.services import conversation_service
from codeai.services.conversation_service import ConversationService, context_lock


@pytest.fixture
def file_engine(tmp_path):
    """On-disk SQLite so each thread gets its own connection."""
    test_engine = create_engine(
        f"sqlite:///{tmp_path / 'codeai.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    enable_sqlite_foreign_keys(test_engine)
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


def test_concurrent_context_merges_keep_every_feature(file_engine):
    with Session(file_engine) as db:
        conversation_id = ConversationService(db).create_conversation("Race").id

    per_thread = 15
    barrier = threading.Barrier(2)
    errors = []

    def merge_features(prefix):
        try:
            barrier.wait()
            for index in range(per_thread):
                with Session(file_engine) as db:
                    ConversationService(db).merge_project_context(
                        conversation_id, {"features_built": [f"{prefix}{index}"]}
                    )
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=merge_features, args=(prefix,)) for prefix in ("A", "B")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    with Session(file_engine) as db:
        features = ConversationService(db).get_conversation(conversation_id).features_built
    expected = {f"{prefix}{index}" for prefix in ("A", "B") for index in range(per_thread)}
    assert set(features) == expected
    assert len(features) == len(expected)


def test_merge_unions_lists_and_overwrites_scalars(session):
    service = ConversationService(session)
    conversation_id = service.create_conversation().id

    service.merge_project_context(conversation_id, {"project_name": "Orbit", "tech_stack": ["HTML"]})
    merged = service.merge_project_context(
        conversation_id, {"project_name": "Nova", "tech_stack": ["CSS", "HTML"], "project_summary": None}
    )

    assert merged.project_name == "Nova"
    assert merged.tech_stack == ["HTML", "CSS"]
    assert merged.project_summary is None
    assert service.merge_project_context(999, {"project_name": "X"}) is None


def test_delete_releases_context_lock(session):
    service = ConversationService(session)
    conversation_id = service.create_conversation().id
    context_lock(conversation_id)
    assert conversation_id in conversation_service._context_locks

    assert service.delete_conversation(conversation_id)
    assert conversation_id not in conversation_service._context_locks


def test_messages_follow_insertion_order(session):
    service = ConversationService(session)
    conversation_id = service.create_conversation().id
    first = service.add_message(conversation_id, MessageRole.USER, "first")
    second = service.add_message(conversation_id, MessageRole.ASSISTANT, "second")

    # Clock stepped backwards between the two writes
    second.created_at = first.created_at - timedelta(seconds=5)
    session.add(second)
    session.commit()

    assert [m.content for m in service.get_messages(conversation_id)] == ["first", "second"]
