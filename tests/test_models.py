import pytest
from pydantic import ValidationError

from openapi_model.model.operation import (
    ExternalDocumentation,
    Operation,
    Parameter,
    Reference,
    RequestBody,
    Response,
    Responses,
)
from openapi_model.model.status_code import InvalidFormatError, StatusCode, WrongLengthError


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)


class TestParameter:
    def test_create_from_document(self):
        p = Parameter.model_validate({"name": "id", "in": "path", "required": True, "schema": {"type": "integer"}})
        assert p.name == "id"
        assert p.location == "path"
        assert p.required is True
        assert p.description is None
        assert p.schema_ == {"type": "integer"}

    def test_create_by_field_name(self):
        p = Parameter(name="age", location="query", schema_={"type": "integer", "minimum": 0})
        assert _dump(p) == {"name": "age", "in": "query", "schema": {"type": "integer", "minimum": 0}}

    def test_unknown_location_rejected(self):
        with pytest.raises(ValidationError):
            Parameter.model_validate({"name": "id", "in": "body"})

    def test_explicit_false_is_kept(self):
        data = {"name": "limit", "in": "query", "required": False}
        assert _dump(Parameter.model_validate(data)) == data


class TestResponses:
    def test_fragment_decodes_to_two_keys(self):
        responses = Responses.model_validate({"200": {"description": "ok"}, "4XX": {"description": "client"}})
        assert set(responses.responses) == {StatusCode.exact(200), StatusCode.wildcard(4)}
        assert responses.default is None

    def test_fragment_re_encodes_canonical_keys(self):
        responses = Responses.model_validate({200: {"description": "ok"}, "4xx": {"description": "client"}})
        assert _dump(responses) == {"200": {"description": "ok"}, "4XX": {"description": "client"}}

    def test_default_and_extensions(self):
        data = {"default": {"description": "error"}, "204": {"description": "gone"}, "x-note": "kept"}
        responses = Responses.model_validate(data)
        assert isinstance(responses.default, Response)
        assert responses.extensions == {"x-note": "kept"}
        assert _dump(responses) == data

    def test_reference_entry(self):
        responses = Responses.model_validate({"404": {"$ref": "#/components/responses/NotFound"}})
        entry = responses["404"]
        assert isinstance(entry, Reference)
        assert entry.ref == "#/components/responses/NotFound"

    def test_lookup_by_any_spelling(self):
        responses = Responses.model_validate({"5xx": {"description": "server"}})
        assert responses["5XX"] is responses[StatusCode.wildcard(5)]

    def test_sorted_responses(self):
        responses = Responses.model_validate(
            {"5XX": {"description": "a"}, "404": {"description": "b"}, "200": {"description": "c"}}
        )
        keys = [str(code) for code, _ in responses.sorted_responses()]
        assert keys == ["200", "404", "5XX"]
        assert list(_dump(responses)) == ["5XX", "404", "200"]

    def test_duplicate_spellings_last_wins(self):
        responses = Responses.model_validate({200: {"description": "first"}, "200": {"description": "second"}})
        assert len(responses.responses) == 1
        assert responses[200].description == "second"

    def test_invalid_key_reports_location(self):
        with pytest.raises(ValidationError) as exc_info:
            Responses.model_validate({"200": {"description": "ok"}, "2XY": {"description": "bad"}})
        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert "2XY" in errors[0]["loc"]
        assert isinstance(errors[0]["ctx"]["error"], InvalidFormatError)

    def test_wrong_length_key(self):
        with pytest.raises(ValidationError) as exc_info:
            Responses.model_validate({"6666": {"description": "bad"}})
        assert isinstance(exc_info.value.errors()[0]["ctx"]["error"], WrongLengthError)

    def test_build_from_status_codes(self):
        responses = Responses.from_codes(
            {StatusCode.exact(201): Response(description="Created"), "4xx": Response(description="Client")},
            default=Response(description="Other"),
        )
        assert responses[201].description == "Created"
        assert _dump(responses) == {
            "default": {"description": "Other"},
            "201": {"description": "Created"},
            "4XX": {"description": "Client"},
        }

    def test_keyword_construction_uses_document_layout(self):
        responses = Responses(default=Response(description="Other"))
        assert responses.responses == {}
        assert _dump(responses) == {"default": {"description": "Other"}}

    @pytest.mark.parametrize("key", ["extensions", "responses"])
    def test_field_named_key_is_a_status_code(self, key):
        with pytest.raises(ValidationError) as exc_info:
            Responses.model_validate({"200": {"description": "ok"}, key: {"description": "nested"}})
        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert key in errors[0]["loc"]
        assert isinstance(errors[0]["ctx"]["error"], WrongLengthError)


class TestOperation:
    def test_create_minimal_operation(self):
        op = Operation.model_validate({"responses": {"200": {"description": "Success"}}})
        assert op.tags == []
        assert op.summary is None
        assert op.request_body is None
        assert _dump(op) == {"responses": {"200": {"description": "Success"}}}

    def test_empty_containers_omitted(self):
        op = Operation.model_validate(
            {"tags": [], "parameters": [], "security": [], "responses": {"200": {"description": "ok"}}}
        )
        assert _dump(op) == {"responses": {"200": {"description": "ok"}}}

    def test_responses_always_emitted(self):
        op = Operation.model_validate({"operationId": "ping", "responses": {}})
        assert _dump(op) == {"operationId": "ping", "responses": {}}

    def test_missing_responses_rejected(self):
        with pytest.raises(ValidationError):
            Operation.model_validate({"summary": "no responses"})

    def test_post_operation_with_body(self):
        op = Operation.model_validate(
            {
                "operationId": "createUser",
                "requestBody": {
                    "required": True,
                    "content": {"application/json": {"schema": {"type": "object"}}},
                },
                "responses": {"201": {"description": "Created"}},
            }
        )
        assert isinstance(op.request_body, RequestBody)
        assert op.request_body.content["application/json"].schema_ == {"type": "object"}

    def test_parameter_reference(self):
        op = Operation.model_validate(
            {
                "parameters": [{"$ref": "#/components/parameters/Limit"}, {"name": "id", "in": "path"}],
                "responses": {"200": {"description": "ok"}},
            }
        )
        assert isinstance(op.parameters[0], Reference)
        assert isinstance(op.parameters[1], Parameter)

    def test_round_trip_preserves_document(self):
        data = {
            "tags": ["users"],
            "summary": "Delete user",
            "externalDocs": {"url": "https://example.com/docs"},
            "operationId": "deleteUser",
            "parameters": [{"name": "id", "in": "path", "required": True}],
            "responses": {"204": {"description": "Deleted"}, "4XX": {"description": "Client error"}},
            "deprecated": True,
            "x-internal": False,
        }
        op = Operation.model_validate(data)
        assert isinstance(op.external_docs, ExternalDocumentation)
        assert _dump(op) == data
        assert _dump(Operation.model_validate(_dump(op))) == data

    def test_extensions_key_is_ignored(self):
        op = Operation.model_validate({"responses": {}, "extensions": {"summary": "injected", "foo": 1}})
        assert op.extensions == {}
        assert op.summary is None
        assert _dump(op) == {"responses": {}}

    def test_extensions_key_beside_x_keys(self):
        op = Operation.model_validate({"responses": {}, "extensions": "abc", "x-a": 1})
        assert op.extensions == {"x-a": 1}
        assert _dump(op) == {"responses": {}, "x-a": 1}

    def test_extensions_not_leaked_as_field(self):
        op = Operation.model_validate({"responses": {}, "x-a": 1})
        assert "extensions" not in _dump(op)
        assert _dump(op)["x-a"] == 1
