"""Documents: files stored in Clio, with binary upload and download."""

from __future__ import annotations

from loguru import logger

from clio_adapter.models.execution import BinaryData, ExecutionItem, OutputItem
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
from clio_adapter.services.clio_client import ClioAPIError, ClioClient

RESOURCE = "documents"
DISPLAY_NAME = "Document"
DESCRIPTION = "Manage documents and folders"
DEFAULT_OPERATION = "listDocuments"

OPERATIONS = [
    operation("Delete", "deleteDocument", "Delete a document"),
    operation("Download", "downloadDocument", "Download a document"),
    operation("Get", "getDocument", "Get a document by ID", "Get a document"),
    operation("List", "listDocuments", "List all documents"),
    operation("Upload", "uploadDocument", "Upload a document"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listDocuments"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listDocuments"],
        sub_fields=[
            option("Matter ID", "matter_id", "number", 0, "Filter by matter"),
            option("Query", "query", "string", "", "Search query"),
        ],
    ),
    id_field(
        "Document ID",
        "documentId",
        resource=RESOURCE,
        operations=["getDocument", "deleteDocument", "downloadDocument"],
        description="The ID of the document",
    ),
    field("File Name", "fileName", resource=RESOURCE, operations=["uploadDocument"], required=True, default="", description="Name for the document"),
    field(
        "Binary Property",
        "binaryPropertyName",
        resource=RESOURCE,
        operations=["uploadDocument"],
        required=True,
        default="data",
        description="Name of the binary property containing the file",
    ),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["uploadDocument"],
        placeholder="Add Field",
        sub_fields=[
            option("Matter ID", "matter_id", "number", 0, "Associated matter"),
            option("Description", "description", "string", "", "Document description"),
        ],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/documents.json")


async def _get(client: ClioClient, item: ExecutionItem):
    document_id = require_id(item, "documentId")
    return await client.request("GET", f"/documents/{document_id}.json")


async def _upload(client: ClioClient, item: ExecutionItem):
    file_name = item.get_parameter("fileName")
    binary = item.get_binary(item.get_parameter("binaryPropertyName", "data"))
    additional = collection_parameter(item, "additionalFields")

    fields: dict = {}
    if additional.get("matter_id"):
        fields["matter"] = reference(additional["matter_id"])
    if additional.get("description"):
        fields["description"] = additional["description"]

    return await client.upload_document(
        "/documents.json",
        binary.data,
        file_name,
        binary.mime_type or "application/octet-stream",
        fields,
    )


async def _delete(client: ClioClient, item: ExecutionItem):
    document_id = require_id(item, "documentId")
    await client.request("DELETE", f"/documents/{document_id}.json")
    return deleted("documentId", document_id)


async def _download_content(client: ClioClient, document_id: int) -> bytes:
    """Download a document's content.

    Tries /documents/{id}/download first. On 404, looks up the latest
    document version and downloads that instead.
    """
    try:
        return await client.download_document(f"/documents/{document_id}/download.json")
    except ClioAPIError as e:
        if e.status_code != 404:
            raise
        logger.debug("Document download 404, trying via document_version…")

    doc = await client.request(
        "GET",
        f"/documents/{document_id}.json",
        qs={"fields": "id,latest_document_version{id}"},
    )
    version = (doc.get("latest_document_version") or {}).get("id")
    if not version:
        raise ClioAPIError(404, f"No document version found for document {document_id}")

    return await client.download_document(f"/document_versions/{version}/download.json")


async def _download(client: ClioClient, item: ExecutionItem):
    document_id = require_id(item, "documentId")
    content = await _download_content(client, document_id)
    logger.info("Downloaded document {} ({} bytes)", document_id, len(content))
    return OutputItem(
        json_data={"documentId": document_id},
        binary={"data": BinaryData(data=content, file_name=f"document_{document_id}")},
    )


_HANDLERS = {
    "listDocuments": _list,
    "getDocument": _get,
    "uploadDocument": _upload,
    "deleteDocument": _delete,
    "downloadDocument": _download,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
