def test_chain_reports_block_height(client):
    body = client.get("/chain").get_json()

    assert body == {"ok": True, "block_height": 0, "next_election_id": 0}


def test_advance_chain(app, client, auth_headers):
    app.config["CHAIN_OPERATORS"] = ["ST0OPERATOR"]
    headers = auth_headers("ST0OPERATOR")

    response = client.post("/chain/blocks", json={"block_height": 7}, headers=headers)
    assert response.get_json()["block_height"] == 7

    response = client.post("/chain/blocks", json={"block_height": 3}, headers=headers)
    assert response.status_code == 400
    assert client.get("/chain").get_json()["block_height"] == 7


def test_only_chain_operators_advance_the_chain(app, client, auth_headers):
    app.config["CHAIN_OPERATORS"] = ["ST0OPERATOR"]

    response = client.post(
        "/chain/blocks",
        json={"block_height": 1000000},
        headers=auth_headers("ST2ALICE"),
    )

    assert response.status_code == 403
    assert response.get_json()["error"] == "Unauthorized"
    assert client.get("/chain").get_json()["block_height"] == 0


def test_chain_has_no_operators_by_default(client, auth_headers):
    response = client.post(
        "/chain/blocks", json={"block_height": 3}, headers=auth_headers("ST1ADMIN")
    )

    assert response.status_code == 403


def test_block_height_above_maximum_is_rejected(app, client, auth_headers):
    app.config["CHAIN_OPERATORS"] = ["ST0OPERATOR"]

    response = client.post(
        "/chain/blocks",
        json={"block_height": 2**63},
        headers=auth_headers("ST0OPERATOR"),
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "InvalidParameters"


def test_verify_identity_and_read_attestation(client, auth_headers, set_block):
    set_block(4)
    response = client.post(
        "/identity/verify",
        json={
            "proof": "0xproof",
            "identity_commitment": "0xcommitment",
            "verification_method": "zk-snark",
        },
        headers=auth_headers("ST2ALICE"),
    )

    assert response.status_code == 200
    assert response.get_json()["identity"] == {
        "principal": "ST2ALICE",
        "verified": True,
        "verification_method": "zk-snark",
        "verification_block": 4,
    }

    body = client.get("/identity/ST2ALICE").get_json()
    assert body["identity"]["verified"] is True

    events = client.get("/chain/events?event_type=identity-verified").get_json()
    assert [event["principal"] for event in events["events"]] == ["ST2ALICE"]


def test_missing_attestation_is_not_found(client):
    response = client.get("/identity/ST9NOBODY")

    assert response.status_code == 404
    assert response.get_json()["error"] == "NotFound"


def test_verification_method_length_is_bounded(app, client, auth_headers):
    response = client.post(
        "/identity/verify",
        json={
            "proof": "0xproof",
            "identity_commitment": "0xcommitment",
            "verification_method": "m" * (app.config["MAX_METHOD_LENGTH"] + 1),
        },
        headers=auth_headers("ST2ALICE"),
    )

    assert response.status_code == 400
    assert client.get("/identity/ST2ALICE").status_code == 404
