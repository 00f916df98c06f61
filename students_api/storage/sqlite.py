import logging

from sqlalchemy.exc import SQLAlchemyError

from students_api.core.database import (
    create_database_tables,
    create_session_factory,
    create_sqlite_engine,
)
from students_api.core.exceptions import StorageError, StudentNotFoundError
from students_api.models.student import Student as StudentModel
from students_api.schemas.student import Student
from students_api.storage.base import Storage

logger = logging.getLogger(__name__)


class SqliteStorage(Storage):
    """Storage backed by a single SQLite database file."""

    def __init__(self, storage_path: str, echo: bool = False):
        self.storage_path = storage_path
        self.engine = create_sqlite_engine(storage_path, echo=echo)
        try:
            create_database_tables(self.engine)
        except SQLAlchemyError as e:
            self.engine.dispose()
            raise StorageError(f"can not open database {storage_path}: {e}") from e
        self.SessionLocal = create_session_factory(self.engine)

    def create_student(self, name: str, email: str, age: int) -> int:
        db_student = StudentModel(name=name, email=email, age=age)
        try:
            with self.SessionLocal() as db:
                db.add(db_student)
                db.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"insert error: {e}") from e
        return db_student.id

    def get_student_by_id(self, student_id: int) -> Student:
        try:
            with self.SessionLocal() as db:
                db_student = db.query(StudentModel).filter(StudentModel.id == student_id).first()
        except SQLAlchemyError as e:
            raise StorageError(f"query error: {e}") from e

        if db_student is None:
            raise StudentNotFoundError(student_id)
        return Student.model_validate(db_student)

    def close(self) -> None:
        logger.info(f"Closing database {self.storage_path}")
        self.engine.dispose()
