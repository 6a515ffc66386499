"""Top-level document records: info, paths, components and the root object."""

from collections.abc import Iterator
from typing import Any

from pydantic import Field

from .base import DocumentModel
from .operation import ExternalDocumentation, Operation, Parameter, ReferenceOr, Server

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class Contact(DocumentModel):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(DocumentModel):
    name: str
    url: str | None = None


class Info(DocumentModel):
    title: str
    version: str
    description: str | None = None
    terms_of_service: str | None = Field(default=None, alias="termsOfService")
    contact: Contact | None = None
    license: License | None = None


class Tag(DocumentModel):
    name: str
    description: str | None = None
    external_docs: ExternalDocumentation | None = Field(default=None, alias="externalDocs")


class PathItem(DocumentModel):
    """Operations available on a single path."""

    ref: str | None = Field(default=None, alias="$ref")
    summary: str | None = None
    description: str | None = None
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] = []
    parameters: list[ReferenceOr[Parameter]] = []

    def operations(self) -> Iterator[tuple[str, Operation]]:
        """Yield (method, operation) pairs for the methods that are present."""
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method, operation


class Components(DocumentModel):
    schemas: dict[str, Any] = {}
    responses: dict[str, Any] = {}
    parameters: dict[str, Any] = {}
    examples: dict[str, Any] = {}
    request_bodies: dict[str, Any] = Field(default={}, alias="requestBodies")
    headers: dict[str, Any] = {}
    security_schemes: dict[str, Any] = Field(default={}, alias="securitySchemes")
    links: dict[str, Any] = {}
    callbacks: dict[str, Any] = {}


class OpenAPI(DocumentModel):
    """Root of an OpenAPI 3.x document."""

    openapi: str
    info: Info
    servers: list[Server] = []
    paths: dict[str, PathItem] = {}
    components: Components | None = None
    security: list[dict[str, list[str]]] = []
    tags: list[Tag] = []
    external_docs: ExternalDocumentation | None = Field(default=None, alias="externalDocs")

    def operations(self) -> Iterator[tuple[str, str, Operation]]:
        """Yield (path, method, operation) for every operation in the document."""
        for path, item in self.paths.items():
            for method, operation in item.operations():
                yield path, method, operation
