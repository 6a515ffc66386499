"""Operation records and the records they are built from."""

from typing import Any, Literal, TypeVar, Union

from pydantic import Field

from .base import DocumentModel
from .status_code import StatusCode

T = TypeVar("T")


class Reference(DocumentModel):
    """A ``$ref`` pointer to a component defined elsewhere."""

    ref: str = Field(alias="$ref")


# Reference is listed first so a bare {"$ref": ...} never resolves to a record
# whose fields are all optional.
ReferenceOr = Union[Reference, T]


class ExternalDocumentation(DocumentModel):
    url: str
    description: str | None = None


class ServerVariable(DocumentModel):
    default: str
    enum: list[str] = []
    description: str | None = None


class Server(DocumentModel):
    url: str
    description: str | None = None
    variables: dict[str, ServerVariable] = {}


class MediaType(DocumentModel):
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Any] = {}
    encoding: dict[str, Any] = {}


class Parameter(DocumentModel):
    """A single operation parameter (query, path, header, or cookie)."""

    name: str
    location: Literal["query", "header", "path", "cookie"] = Field(alias="in")
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    allow_empty_value: bool | None = Field(default=None, alias="allowEmptyValue")
    style: str | None = None
    explode: bool | None = None
    allow_reserved: bool | None = Field(default=None, alias="allowReserved")
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Any] = {}
    content: dict[str, MediaType] = {}


class RequestBody(DocumentModel):
    content: dict[str, MediaType]
    description: str | None = None
    required: bool | None = None


class Header(DocumentModel):
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    style: str | None = None
    explode: bool | None = None
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Any] = {}
    content: dict[str, MediaType] = {}


class Response(DocumentModel):
    description: str
    headers: dict[str, ReferenceOr[Header]] = {}
    content: dict[str, MediaType] = {}
    links: dict[str, Any] = {}


class Responses(DocumentModel):
    """Responses keyed by status code, plus an optional ``default`` entry.

    In a document this is one flat mapping; every key other than ``default``
    and ``x-`` extensions is a status code, gathered into ``responses`` on
    decode and spread back out on encode. Keyword arguments and
    ``model_validate`` both take the document layout; use ``from_codes`` to
    build from a ``StatusCode`` mapping. Entries keep document order;
    duplicate keys such as ``200`` and ``"200"`` resolve to the last one.
    """

    default: ReferenceOr[Response] | None = None
    responses: dict[StatusCode, ReferenceOr[Response]] = {}

    @classmethod
    def _unflatten(cls, data: dict[Any, Any]) -> dict[Any, Any]:
        rest = {"responses": {k: v for k, v in data.items() if k != "default"}}
        if "default" in data:
            rest["default"] = data["default"]
        return rest

    @classmethod
    def from_codes(
        cls,
        responses: dict[Any, Union[Reference, Response]],
        default: Union[Reference, Response, None] = None,
    ) -> "Responses":
        """Build from a mapping keyed by ``StatusCode`` (or any decodable key)."""
        data: dict[Any, Any] = {}
        if default is not None:
            data["default"] = default
        for key, value in responses.items():
            data[key.encode() if isinstance(key, StatusCode) else key] = value
        return cls.model_validate(data)

    def _flatten(self, data: dict[str, Any]) -> dict[str, Any]:
        data.update(data.pop("responses", {}))
        return data

    def sorted_responses(self) -> list[tuple[StatusCode, Union[Reference, Response]]]:
        return sorted(self.responses.items(), key=lambda item: item[0])

    def __getitem__(self, key: Any) -> Union[Reference, Response]:
        if not isinstance(key, StatusCode):
            key = StatusCode.decode(key)
        return self.responses[key]


class Operation(DocumentModel):
    """A single API operation on a path."""

    tags: list[str] = []
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = Field(default=None, alias="externalDocs")
    operation_id: str | None = Field(default=None, alias="operationId")
    parameters: list[ReferenceOr[Parameter]] = []
    request_body: ReferenceOr[RequestBody] | None = Field(default=None, alias="requestBody")
    responses: Responses
    callbacks: dict[str, Any] = {}
    deprecated: bool | None = None
    security: list[dict[str, list[str]]] = []
    servers: list[Server] = []
