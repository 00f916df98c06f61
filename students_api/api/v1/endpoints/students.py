import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from students_api.api.deps import get_storage
from students_api.core.exceptions import (
    InternalServerException,
    NotFoundException,
    StorageError,
    StudentNotFoundError,
)
from students_api.schemas.student import (
    INT64_MAX,
    INT64_MIN,
    CreatedResponse,
    Student,
    StudentCreate,
)
from students_api.storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter()

StudentId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    storage: Storage = Depends(get_storage)
):
    """
    Create a student

    - **name**: required, non-empty
    - **email**: required, valid email address
    - **age**: required, greater than 0
    """
    logger.info("creating a student")
    try:
        student_id = storage.create_student(student.name, student.email, student.age)
    except StorageError as e:
        logger.error(f"failed to create student: {e}")
        raise InternalServerException(str(e)) from e

    logger.info(f"student created successfully, id={student_id}")
    return CreatedResponse(id=student_id)


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: StudentId,
    storage: Storage = Depends(get_storage)
):
    """
    Fetch one student by id
    """
    logger.info(f"getting a student, id={student_id}")
    try:
        return storage.get_student_by_id(student_id)
    except StudentNotFoundError as e:
        logger.error(f"error in getting student, id={student_id}: {e}")
        raise NotFoundException(str(e)) from e
    except StorageError as e:
        logger.error(f"error in getting student, id={student_id}: {e}")
        raise InternalServerException(str(e)) from e
