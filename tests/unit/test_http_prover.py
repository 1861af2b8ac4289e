"""
Module 04 - HTTP Prover Adapter Unit Tests
Tests for core/circuit/http_prover.py and core/circuit/prover.py

No network access: every request goes to FakeHttpClient.
"""
import json

import pytest

from core.circuit.http_prover import HttpProverService
from core.circuit.prover import CircuitArtifact, InnerProver, ProverBackend, RawProof
from core.schemas.errors import CircuitLoadError, ErrorCodes, ProverServiceError
from core.schemas.transfer import SpendableNote

from fixtures.common import filled
from fixtures.prover_fixtures import FakeHttpClient, connection_error, make_response


CIRCUIT = CircuitArtifact(bytecode="H4sIAAAA", abi={"parameters": []}, name="recursive")


def _service(routes=None, error=None, circuit=CIRCUIT):
    client = FakeHttpClient(routes=routes, error=error)
    return HttpProverService(client, "http://prover:8080/", circuit), client


class TestProtocols:
    """The HTTP service satisfies both prover contracts."""

    def test_is_backend_and_inner_prover(self):
        service, _ = _service()
        assert isinstance(service, ProverBackend)
        assert isinstance(service, InnerProver)


class TestBackendCalls:
    """execute / prove / verify wire format."""

    def test_execute(self):
        service, client = _service({"execute": {"witness": "0xabcd", "return_value": [1]}})

        result = service.execute({"amount": [0] * 32})

        assert result.witness == b"\xab\xcd"
        assert result.return_value == [1]
        url, body = client.posts[0]
        assert url == "http://prover:8080/execute"
        assert body["circuit"] == CIRCUIT.to_dict()
        assert body["inputs"] == {"amount": [0] * 32}

    def test_generate_proof(self):
        service, client = _service({"prove": {"proof": "0x0102", "public_inputs": ["0x03"]}})

        raw = service.generate_proof(b"\x09", keccak=True)

        assert raw == RawProof(proof=b"\x01\x02", public_inputs=["0x03"])
        _, body = client.posts[0]
        assert body["witness"] == "0x09"
        assert body["keccak"] is True

    @pytest.mark.parametrize("answer,expected", [(True, True), (False, False), ("yes", False)])
    def test_verify_proof(self, answer, expected):
        service, client = _service({"verify": {"valid": answer}})

        assert service.verify_proof(RawProof(proof=b"\xff", public_inputs=["0x01"]), keccak=False) is expected
        _, body = client.posts[0]
        assert body["proof"] == "0xff"
        assert body["public_inputs"] == ["0x01"]
        assert body["keccak"] is False

    def test_missing_circuit(self):
        service, client = _service(circuit=None)

        with pytest.raises(ProverServiceError, match="No circuit"):
            service.execute({})
        assert client.posts == []


class TestDirectTransfer:
    """InnerProver wire format."""

    def test_payload(self):
        service, client = _service({"direct-transfer": {"proof": "0xaa", "public_inputs": ["0x0b"]}})
        notes = [
            SpendableNote(amount=700, commitment=filled(1), leaf_index=3, metadata={"owner": "alice"}),
            SpendableNote(amount=300),
        ]

        inner = service.prove_direct_transfer(notes, 250, filled(7), filled(8))

        assert inner.proof == b"\xaa"
        assert inner.public_inputs == ["0x0b"]
        _, body = client.posts[0]
        assert body["amount"] == "250"
        assert body["send_handle"] == "0x" + "07" * 32
        assert body["change_handle"] == "0x" + "08" * 32
        assert body["notes"][0] == {
            "amount": "700",
            "commitment": "0x" + "01" * 32,
            "leaf_index": 3,
            "owner": "alice",
        }
        assert body["notes"][1]["commitment"] is None


class TestServiceErrors:
    """Transport and protocol failures become ProverServiceError."""

    def test_connection_error_is_retryable(self):
        service, _ = _service(error=connection_error())

        with pytest.raises(ProverServiceError) as exc_info:
            service.execute({})

        assert exc_info.value.retryable is True
        assert exc_info.value.code == ErrorCodes.PROVER_SERVICE_ERROR
        assert exc_info.value.details["operation"] == "execute"

    def test_server_error_is_retryable(self):
        service, _ = _service({"prove": lambda body: make_response({"error": "oom"}, status_code=503)})

        with pytest.raises(ProverServiceError) as exc_info:
            service.generate_proof(b"\x00", keccak=True)

        assert exc_info.value.details["status_code"] == 503
        assert "oom" in exc_info.value.details["body"]
        assert exc_info.value.retryable is True

    def test_client_error_not_retryable(self):
        service, _ = _service({})

        with pytest.raises(ProverServiceError) as exc_info:
            service.verify_proof(RawProof(proof=b""), keccak=True)

        assert exc_info.value.details["status_code"] == 404
        assert exc_info.value.retryable is False

    def test_missing_field(self):
        service, _ = _service({"execute": {"return_value": None}})

        with pytest.raises(ProverServiceError, match="missing 'witness'"):
            service.execute({})

    def test_non_object_body(self):
        service, _ = _service({"verify": [True]})

        with pytest.raises(ProverServiceError, match="non-object"):
            service.verify_proof(RawProof(proof=b""), keccak=True)


class TestCircuitArtifact:
    """Loading compiled circuit descriptions."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "recursive_transfer_circuit.json"
        path.write_text(json.dumps({"bytecode": "abc", "abi": {"x": 1}}))

        circuit = CircuitArtifact.from_file(path)

        assert circuit.bytecode == "abc"
        assert circuit.abi == {"x": 1}
        assert circuit.name == "recursive_transfer_circuit"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CircuitLoadError) as exc_info:
            CircuitArtifact.from_file(tmp_path / "nope.json")
        assert exc_info.value.code == ErrorCodes.CIRCUIT_LOAD_ERROR

    def test_bad_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(CircuitLoadError):
            CircuitArtifact.from_file(path)

    def test_missing_bytecode(self):
        with pytest.raises(CircuitLoadError):
            CircuitArtifact.from_dict({"abi": {}})
