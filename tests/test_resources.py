"""
Tests for the Connector resources
"""
from datetime import datetime, timezone

import pydantic
import pytest

from enmeshed_connector.models import (
    DisplayName,
    IdentityAttribute,
    RelationshipStatus,
    RelationshipTemplateContent,
    Request,
)
from enmeshed_connector.models.errors import EnmeshedError, MalformedResponseError, NotFoundError

from conftest import IDENTITY_INFO, display_name_attribute, read_accept_item, relationship


class TestAccountResource:
    """Tests for account operations."""

    def test_get_identity_info(self, client, httpx_mock, mock_responses):
        """Should get the Connector identity."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Account/IdentityInfo",
            json={"result": mock_responses["identity_info"]},
        )

        identity = client.account.get_identity_info()

        assert identity.address == IDENTITY_INFO["address"]
        assert identity.public_key == IDENTITY_INFO["publicKey"]
        assert identity.realm == IDENTITY_INFO["realm"]

    def test_sync(self, client, httpx_mock):
        """Should POST to the sync endpoint."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Account/Sync",
            method="POST",
            status_code=204,
        )

        assert client.account.sync() is None
        assert httpx_mock.requests[0].method == "POST"


class TestAttributesResource:
    """Tests for attribute operations."""

    def test_search_with_filters(self, client, httpx_mock, mock_responses):
        """Should search attributes by content type, owner and value type."""
        address = IDENTITY_INFO["address"]
        httpx_mock.add_response(
            url=(
                "http://connector.test/api/v2/Attributes"
                f"?content.%40type=IdentityAttribute&content.owner={address}"
                "&content.value.%40type=DisplayName"
            ),
            json={"result": [mock_responses["display_name_attribute"]]},
        )

        result = client.attributes.search(owner=address, value_type="DisplayName")

        assert len(result) == 1
        assert result[0].id == "ATTR_ID"
        assert result[0].content.value == DisplayName(value="Test Connector")

    def test_search_omits_unset_filters(self, client, httpx_mock):
        """Should not send filters that are None."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Attributes?content.%40type=IdentityAttribute",
            json={"result": []},
        )

        assert client.attributes.search() == []

    def test_create(self, client, httpx_mock, mock_responses):
        """Should wrap the attribute in a content envelope."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Attributes",
            method="POST",
            status_code=201,
            json={"result": mock_responses["display_name_attribute"]},
        )

        result = client.attributes.create(
            IdentityAttribute(owner=IDENTITY_INFO["address"], value=DisplayName(value="Test Connector"))
        )

        assert result.id == "ATTR_ID"
        assert httpx_mock.requests[0].json == {
            "content": {
                "@type": "IdentityAttribute",
                "owner": IDENTITY_INFO["address"],
                "value": {"@type": "DisplayName", "value": "Test Connector"},
            }
        }


class TestRelationshipTemplatesResource:
    """Tests for relationship template operations."""

    def test_create_own(self, client, httpx_mock):
        """Should create a template with expiry and allocation limit."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/RelationshipTemplates/Own",
            method="POST",
            status_code=201,
            json={
                "result": {
                    "id": "RLT_XXX",
                    "isOwn": True,
                    "createdBy": IDENTITY_INFO["address"],
                    "expiresAt": "2024-01-20T01:00:00.000Z",
                    "maxNumberOfAllocations": 1,
                }
            },
        )
        expires_at = datetime(2024, 1, 20, 1, 0, tzinfo=timezone.utc)

        template = client.relationship_templates.create_own(
            content=RelationshipTemplateContent(on_new_relationship=Request(items=[])),
            expires_at=expires_at,
        )

        assert template.id == "RLT_XXX"
        assert template.expires_at == expires_at
        body = httpx_mock.requests[0].json
        assert body["maxNumberOfAllocations"] == 1
        assert body["expiresAt"].startswith("2024-01-20T01:00:00")
        assert body["content"]["@type"] == "RelationshipTemplateContent"
        assert body["content"]["onNewRelationship"] == {"@type": "Request", "items": []}

    def test_get_qr_code(self, client, httpx_mock):
        """Should fetch the template as PNG bytes."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/RelationshipTemplates/RLT_XXX",
            content=b"\x89PNG\r\n",
            headers={"content-type": "image/png"},
        )

        qr_code = client.relationship_templates.get_qr_code("RLT_XXX")

        assert qr_code == b"\x89PNG\r\n"
        assert httpx_mock.requests[0].headers["accept"] == "image/png"


class TestRelationshipsResource:
    """Tests for relationship operations."""

    def test_search_by_template(self, client, httpx_mock):
        """Should search relationships created from a template."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Relationships?template.id=RLT_XXX",
            json={"result": [relationship("Pending", [])]},
        )

        result = client.relationships.search(template_id="RLT_XXX")

        assert [r.id for r in result] == ["REL_XXX"]

    def test_search_parses_errored_response_item(self, client, httpx_mock):
        """Should parse relationships whose response holds an errored item."""
        error_item = {
            "@type": "ErrorResponseItem",
            "result": "Error",
            "code": "error.consumption.requests.invalidRequestItem",
            "message": "Could not process item.",
        }
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Relationships?template.id=RLT_XXX",
            json={"result": [relationship("Pending", [error_item])]},
        )

        [result] = client.relationships.search(template_id="RLT_XXX")

        [item] = result.creation_change().request.content.response.items
        assert item.result == "Error"
        assert item.code == "error.consumption.requests.invalidRequestItem"

    def test_search_rejects_malformed_relationship(self, client, httpx_mock):
        """Should raise MalformedResponseError for a relationship of the wrong shape."""
        data = relationship("Pending", [])
        del data["peer"]
        data["changes"][0]["status"] = "Unheard"
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Relationships?template.id=RLT_XXX",
            json={"result": [data]},
        )

        with pytest.raises(MalformedResponseError) as exc_info:
            client.relationships.search(template_id="RLT_XXX")

        assert isinstance(exc_info.value, EnmeshedError)
        assert isinstance(exc_info.value.__cause__, pydantic.ValidationError)
        locations = [e["loc"] for e in exc_info.value.details["errors"]]
        assert ("peer",) in locations

    def test_search_rejects_non_list_result(self, client, httpx_mock):
        """Should raise MalformedResponseError when the result is not a list."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Relationships?template.id=RLT_XXX",
            json={"result": {"id": "REL_XXX"}},
        )

        with pytest.raises(MalformedResponseError):
            client.relationships.search(template_id="RLT_XXX")

    def test_get_rejects_malformed_relationship(self, client, httpx_mock):
        """Should raise MalformedResponseError for a single malformed relationship."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Relationships/REL_XXX",
            json={"result": {"id": "REL_XXX"}},
        )

        with pytest.raises(MalformedResponseError):
            client.relationships.get("REL_XXX")

    def test_search_by_status(self, client, httpx_mock):
        """Should send the status enum value."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Relationships?status=Active",
            json={"result": []},
        )

        assert client.relationships.search(status=RelationshipStatus.ACTIVE) == []

    def test_get_not_found(self, client, httpx_mock):
        """Should raise NotFoundError for unknown relationships."""
        httpx_mock.add_response(
            url="http://connector.test/api/v2/Relationships/REL_NONE",
            status_code=404,
            json={"error": {"code": "error.runtime.recordNotFound", "message": "Relationship not found."}},
        )

        with pytest.raises(NotFoundError):
            client.relationships.get("REL_NONE")

    @pytest.mark.parametrize("decision,status", [("Accept", "Accepted"), ("Reject", "Rejected")])
    def test_decide_change(self, client, httpx_mock, decision, status):
        """Should PUT an empty content body to the change decision endpoint."""
        httpx_mock.add_response(
            url=f"http://connector.test/api/v2/Relationships/REL_XXX/Changes/RCH_XXX/{decision}",
            method="PUT",
            json={"result": relationship(status, [read_accept_item({"@type": "Surname", "value": "Doe"})])},
        )

        if decision == "Accept":
            result = client.relationships.accept_change("REL_XXX", "RCH_XXX")
        else:
            result = client.relationships.reject_change("REL_XXX", "RCH_XXX")

        assert result.creation_change().status == status
        assert httpx_mock.requests[0].json == {"content": {}}
