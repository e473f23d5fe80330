"""Tasks: to-dos, optionally tied to a matter and assigned to a user."""

from __future__ import annotations

from clio_adapter.constants import TASK_PRIORITIES
from clio_adapter.helpers import clean_object
from clio_adapter.models.execution import ExecutionItem, OutputItem
from clio_adapter.resources.base import (
    collection,
    collection_parameter,
    deleted,
    dispatch,
    field,
    id_field,
    list_records,
    operation,
    option,
    pagination_fields,
    reference,
    require_id,
)
from clio_adapter.services.clio_client import ClioClient

RESOURCE = "tasks"
DISPLAY_NAME = "Task"
DESCRIPTION = "Manage tasks and to-dos"
DEFAULT_OPERATION = "listTasks"

OPERATIONS = [
    operation("Complete", "completeTask", "Mark task complete", "Complete a task"),
    operation("Create", "createTask", "Create a task"),
    operation("Delete", "deleteTask", "Delete a task"),
    operation("Get", "getTask", "Get a task by ID", "Get a task"),
    operation("List", "listTasks", "List all tasks"),
    operation("Update", "updateTask", "Update a task"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listTasks"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listTasks"],
        sub_fields=[
            option("Matter ID", "matter_id", "number", 0, "Filter by matter"),
            option("Assignee ID", "assignee_id", "number", 0, "Filter by assignee"),
            option(
                "Status",
                "status",
                "options",
                "",
                "Filter by status",
                options=[{"name": "Incomplete", "value": "incomplete"}, {"name": "Complete", "value": "complete"}],
            ),
        ],
    ),
    id_field(
        "Task ID",
        "taskId",
        resource=RESOURCE,
        operations=["getTask", "updateTask", "deleteTask", "completeTask"],
        description="The ID of the task",
    ),
    field("Name", "name", resource=RESOURCE, operations=["createTask"], required=True, default="", description="Task name"),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createTask"],
        placeholder="Add Field",
        sub_fields=[
            option("Description", "description", "string", "", "Task description"),
            option("Matter ID", "matter_id", "number", 0, "Associated matter"),
            option("Due Date", "due_at", "dateTime", "", "Due date"),
            option("Priority", "priority", "options", "Normal", "Task priority", options=TASK_PRIORITIES),
            option("Assignee ID", "assignee_id", "number", 0, "User to assign to"),
        ],
    ),
    collection(
        "Update Fields",
        "updateFields",
        resource=RESOURCE,
        operations=["updateTask"],
        placeholder="Add Field",
        sub_fields=[
            option("Name", "name", "string", "", "Task name"),
            option("Description", "description", "string", "", "Description"),
            option("Due Date", "due_at", "dateTime", "", "Due date"),
            option("Priority", "priority", "options", "", "Priority", options=TASK_PRIORITIES),
        ],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/tasks.json")


async def _get(client: ClioClient, item: ExecutionItem):
    task_id = require_id(item, "taskId")
    return await client.request("GET", f"/tasks/{task_id}.json")


async def _create(client: ClioClient, item: ExecutionItem):
    additional = collection_parameter(item, "additionalFields")
    data: dict = {"name": item.get_parameter("name")}
    if additional.get("description"):
        data["description"] = additional["description"]
    if additional.get("matter_id"):
        data["matter"] = reference(additional["matter_id"])
    if additional.get("due_at"):
        data["due_at"] = additional["due_at"]
    if additional.get("priority"):
        data["priority"] = additional["priority"]
    if additional.get("assignee_id"):
        data["assignee"] = reference(additional["assignee_id"])

    return await client.request("POST", "/tasks.json", {"data": data})


async def _update(client: ClioClient, item: ExecutionItem):
    task_id = require_id(item, "taskId")
    data = clean_object(collection_parameter(item, "updateFields"))
    return await client.request("PATCH", f"/tasks/{task_id}.json", {"data": data})


async def _delete(client: ClioClient, item: ExecutionItem):
    task_id = require_id(item, "taskId")
    await client.request("DELETE", f"/tasks/{task_id}.json")
    return deleted("taskId", task_id)


async def _complete(client: ClioClient, item: ExecutionItem):
    task_id = require_id(item, "taskId")
    return await client.request("PATCH", f"/tasks/{task_id}.json", {"data": {"status": "complete"}})


_HANDLERS = {
    "listTasks": _list,
    "getTask": _get,
    "createTask": _create,
    "updateTask": _update,
    "deleteTask": _delete,
    "completeTask": _complete,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
