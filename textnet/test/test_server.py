import os
import sys
import logging
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

import pytest
from fastapi.testclient import TestClient

from textnet.server.main import app


class TestServer:

    @pytest.fixture
    def client(self):
        return TestClient(app)

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_compile(self, client):
        response = client.post("/api/compile", json={
            "trees": ["(S (NP (NN dog)) (VP (VB chases) (NP (NN cat))))"],
        })
        assert response.status_code == 200
        data = response.json()
        assert sorted(n["label"] for n in data["nodes"]) == ["cat", "dog"]
        assert data["propositions"] == ["chases(dog, cat)"]

    def test_requests_do_not_share_a_graph(self, client):
        body = {"trees": ["(S (NP (NN dog)) (VP (VBZ barks)))"]}
        client.post("/api/compile", json=body)
        data = client.post("/api/compile", json=body).json()
        assert len(data["edges"]) == 1

    def test_compile_rejects_malformed_tree(self, client):
        response = client.post("/api/compile", json={"trees": ["(S (NP (NN dog)"]})
        assert response.status_code == 400
        assert "unclosed bracket" in response.json()["detail"]

    def test_compile_requires_trees(self, client):
        response = client.post("/api/compile", json={})
        assert response.status_code == 422

    def test_rules(self, client):
        data = client.get("/api/rules").json()
        assert data["priority"][0] == "trivalent_predicate"
        assert data["priority"][-1] == "default"
        assert data["trivalent"] == [["@VP", "NP"]]
        assert ["NP", "VP"] in data["nounVerb"]
        assert "PRN" in data["ignored"]

    def test_compile_deeply_nested_tree(self, client):
        depth = 2000
        tree = "(S (NP (NN dog)) (VP (VBZ barks) " + "(@VP (CC and) " * depth + "(VBZ bites)" + ")" * depth + "))"
        response = client.post("/api/compile", json={"trees": [tree]})
        assert response.status_code == 200
        assert response.json()["propositions"] == ["barks(dog, dog)", "bites(dog, dog)"]

    def test_verbose_compile_logs_propositions(self, client, caplog):
        caplog.set_level(logging.INFO, logger="textnet.compiler.compiler")
        body = {"trees": ["(S (NP (NN dog)) (VP (VBZ barks)))"], "verbose": True}
        assert client.post("/api/compile", json=body).status_code == 200
        assert "Propositions:\n\tbarks(dog, dog)" in caplog.text

    def test_quiet_compile_logs_nothing(self, client, caplog):
        caplog.set_level(logging.INFO, logger="textnet.compiler.compiler")
        client.post("/api/compile", json={"trees": ["(S (NP (NN dog)) (VP (VBZ barks)))"]})
        assert "Propositions" not in caplog.text
