"""Tests for template CRUD, ownership rules and default seeding."""

from conftest import make_card_data, make_generic_layout

API = "/api/v1"


def _create(client, auth, name="Mine", **overrides):
    body = {"name": name, "frontJson": make_generic_layout(), "backJson": make_generic_layout(elements=[])}
    body.update(overrides)
    return client.post(f"{API}/templates", json=body, auth=auth)


class TestDefaults:
    def test_five_defaults_are_seeded(self, client):
        templates = client.get(f"{API}/templates").json()
        assert len(templates) == 5
        assert all(t["isDefault"] for t in templates)
        assert "Donruss 1991 Style" in {t["name"] for t in templates}
        assert templates[0]["frontJson"]["borderWidth"] == 12

    def test_defaults_cannot_be_modified(self, client, alice, default_template_id):
        response = client.put(f"{API}/templates/{default_template_id}", json={"name": "Hacked"}, auth=alice)
        assert response.status_code == 403

    def test_defaults_cannot_be_deleted(self, client, alice, default_template_id):
        assert client.delete(f"{API}/templates/{default_template_id}", auth=alice).status_code == 403


class TestOwnership:
    def test_create_and_list(self, client, alice):
        created = _create(client, alice)
        assert created.status_code == 201
        listing = client.get(f"{API}/templates", auth=alice).json()
        assert [t["isDefault"] for t in listing] == [True] * 5 + [False]
        own_only = client.get(f"{API}/templates", params={"includeDefaults": "false"}, auth=alice).json()
        assert [t["name"] for t in own_only] == ["Mine"]

    def test_other_users_template_is_hidden(self, client, alice, bob):
        template_id = _create(client, alice).json()["id"]
        assert client.get(f"{API}/templates/{template_id}", auth=bob).status_code == 404
        assert client.put(f"{API}/templates/{template_id}", json={"name": "x"}, auth=bob).status_code == 404
        assert client.delete(f"{API}/templates/{template_id}", auth=bob).status_code == 404
        assert template_id not in {t["id"] for t in client.get(f"{API}/templates", auth=bob).json()}

    def test_partial_update(self, client, alice):
        template_id = _create(client, alice).json()["id"]
        response = client.put(f"{API}/templates/{template_id}", json={"description": "updated"}, auth=alice)
        assert response.status_code == 200
        assert response.json()["name"] == "Mine"
        assert response.json()["description"] == "updated"

    def test_delete(self, client, alice):
        template_id = _create(client, alice).json()["id"]
        assert client.delete(f"{API}/templates/{template_id}", auth=alice).status_code == 204
        assert client.get(f"{API}/templates/{template_id}", auth=alice).status_code == 404

    def test_delete_in_use(self, client, alice):
        template_id = _create(client, alice).json()["id"]
        card = client.post(f"{API}/cards", json={"templateId": template_id, "cardDataJson": make_card_data()}, auth=alice)
        assert card.status_code == 201
        assert client.delete(f"{API}/templates/{template_id}", auth=alice).status_code == 409

    def test_unknown_id(self, client, alice):
        assert client.get(f"{API}/templates/not-a-uuid", auth=alice).status_code == 404


class TestValidation:
    def test_duplicate_element_ids(self, client, alice):
        front = make_generic_layout()
        front["elements"].append({"id": "title", "type": "text", "x": 0, "y": 0})
        response = _create(client, alice, frontJson=front)
        assert response.status_code == 422
        assert "title" in response.json()["message"]

    def test_unknown_element_type(self, client, alice):
        front = make_generic_layout(elements=[{"id": "z", "type": "hologram", "x": 0, "y": 0}])
        assert _create(client, alice, frontJson=front).status_code == 422

    def test_requires_auth(self, client):
        assert _create(client, None).status_code == 401
