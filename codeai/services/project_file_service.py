"""
Project File Service

Files are unique by path within a conversation; writing an existing path
overwrites it in place and keeps its id.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from sqlmodel import Session, select

from codeai.models.project_file import ProjectFile


class ProjectFileService:
    """Service for managing a conversation's project files"""

    def __init__(self, db: Session):
        self.db = db

    def list_files(self, conversation_id: int) -> List[ProjectFile]:
        statement = select(ProjectFile).where(
            ProjectFile.conversation_id == conversation_id
        ).order_by(ProjectFile.path)
        return list(self.db.exec(statement).all())

    def get_file(self, file_id: int) -> Optional[ProjectFile]:
        return self.db.get(ProjectFile, file_id)

    def _upsert(self, conversation_id: int, path: str, content: str, language: str) -> ProjectFile:
        statement = select(ProjectFile).where(
            ProjectFile.conversation_id == conversation_id,
            ProjectFile.path == path,
        )
        project_file = self.db.exec(statement).first()
        now = datetime.utcnow()
        if project_file:
            project_file.content = content
            project_file.language = language
            project_file.updated_at = now
        else:
            project_file = ProjectFile(
                conversation_id=conversation_id,
                path=path,
                content=content,
                language=language,
                created_at=now,
                updated_at=now,
            )
        self.db.add(project_file)
        return project_file

    def upsert_file(self, conversation_id: int, path: str, content: str, language: str) -> ProjectFile:
        """Create the file or overwrite the one already at this path"""
        project_file = self._upsert(conversation_id, path, content, language)
        self.db.commit()
        self.db.refresh(project_file)
        return project_file

    def bulk_upsert(self, conversation_id: int, entries: Iterable) -> List[ProjectFile]:
        """
        Upsert many files in one transaction.

        Entries need path, content and language attributes; entries missing
        any of them are skipped.
        """
        saved = []
        for entry in entries:
            path = getattr(entry, "path", None)
            content = getattr(entry, "content", None)
            language = getattr(entry, "language", None)
            if not path or content is None or not language:
                continue
            project_file = self._upsert(conversation_id, path, content, language)
            # Later entries for the same path must see this one
            self.db.flush()
            if not any(f is project_file for f in saved):
                saved.append(project_file)

        self.db.commit()
        for project_file in saved:
            self.db.refresh(project_file)
        return saved

    def update_content(self, file_id: int, content: str) -> Optional[ProjectFile]:
        project_file = self.db.get(ProjectFile, file_id)
        if not project_file:
            return None
        project_file.content = content
        project_file.updated_at = datetime.utcnow()
        self.db.add(project_file)
        self.db.commit()
        self.db.refresh(project_file)
        return project_file

    def delete_file(self, file_id: int) -> bool:
        project_file = self.db.get(ProjectFile, file_id)
        if not project_file:
            return False
        self.db.delete(project_file)
        self.db.commit()
        return True
