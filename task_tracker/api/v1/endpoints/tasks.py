"""Task API: thin routes that validate, then delegate to TaskService.

Failures propagate as domain exceptions and are rendered as problem details
by task_tracker.core.exception_handlers.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from task_tracker.api.v1.dependencies import get_task_read_service, get_task_service
from task_tracker.application.dtos.task import TaskPayload
from task_tracker.application.services.task_validator import (
    parse_status,
    validate_task_payload,
)
from task_tracker.application.use_cases.tasks import (
    MAX_TASK_ID,
    MIN_TASK_ID,
    TaskService,
)
from task_tracker.domain.enums import TaskStatus
from task_tracker.schemas.problem import ProblemDetail
from task_tracker.schemas.task import TaskRequest, TaskResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_PROBLEM = {"model": ProblemDetail}
_NOT_FOUND = {404: {**_PROBLEM, "description": "Task not found"}}
_BAD_REQUEST = {400: {**_PROBLEM, "description": "Invalid request data"}}

# Exposed as "id" on the wire; ids outside the store's 64-bit range are
# rejected while parsing, as an invalid parameter.
TaskId = Annotated[
    int,
    Path(alias="id", ge=MIN_TASK_ID, le=MAX_TASK_ID, description="Task id"),
]


def _validated(body: TaskRequest) -> TaskPayload:
    return validate_task_payload(
        title=body.title,
        description=body.description,
        status=body.status,
        due_date_time=body.due_date_time,
    )


@router.post(
    "",
    response_model=TaskResponse,
    status_code=201,
    responses={**_BAD_REQUEST},
)
async def create_task(
    body: TaskRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a task. The store assigns id, createdAt and updatedAt."""
    logger.info("Creating task with title: %s", body.title)
    payload = _validated(body)
    created = await task_svc.create_task(payload)
    return TaskResponse.from_result(created)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    task_svc: Annotated[TaskService, Depends(get_task_read_service)],
):
    """List all tasks in creation order (oldest first)."""
    logger.info("Retrieving all tasks")
    tasks = await task_svc.list_tasks()
    return [TaskResponse.from_result(t) for t in tasks]


@router.get(
    "/{id}",
    response_model=TaskResponse,
    responses={**_NOT_FOUND},
)
async def get_task(
    task_id: TaskId,
    task_svc: Annotated[TaskService, Depends(get_task_read_service)],
):
    """Get a task by id."""
    logger.info("Retrieving task with id: %s", task_id)
    task = await task_svc.get_task(task_id)
    return TaskResponse.from_result(task)


@router.patch(
    "/{id}/status",
    response_model=TaskResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def update_task_status(
    task_id: TaskId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    status: Annotated[
        str,
        Query(
            description="New task status",
            json_schema_extra={"enum": TaskStatus.values()},
        ),
    ],
):
    """Update only the status of a task."""
    logger.info("Updating task %s status to: %s", task_id, status)
    new_status = parse_status(status, parameter="status")
    updated = await task_svc.update_task_status(task_id, new_status)
    return TaskResponse.from_result(updated)


@router.put(
    "/{id}",
    response_model=TaskResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def update_task(
    task_id: TaskId,
    body: TaskRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Replace title, description, status and due date of a task."""
    logger.info("Updating task with id: %s", task_id)
    payload = _validated(body)
    updated = await task_svc.update_task(task_id, payload)
    return TaskResponse.from_result(updated)


@router.delete(
    "/{id}",
    status_code=204,
    response_class=Response,
    responses={**_NOT_FOUND},
)
async def delete_task(
    task_id: TaskId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    """Permanently delete a task."""
    logger.info("Deleting task with id: %s", task_id)
    await task_svc.delete_task(task_id)
    return Response(status_code=204)
