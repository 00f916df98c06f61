"""
Storage interface.

Handlers only talk to this interface, so a backend can be swapped
without touching the endpoints.
"""
from abc import ABC, abstractmethod

from students_api.schemas.student import Student


class Storage(ABC):
    """Persistence backend for students."""

    @abstractmethod
    def create_student(self, name: str, email: str, age: int) -> int:
        """
        Persist a new student.

        Returns:
            int: id generated by the backend

        Raises:
            StorageError: the backend failed
        """

    @abstractmethod
    def get_student_by_id(self, student_id: int) -> Student:
        """
        Fetch one student.

        Raises:
            StudentNotFoundError: no student with this id
            StorageError: the backend failed
        """

    def close(self) -> None:
        """Release backend resources."""
