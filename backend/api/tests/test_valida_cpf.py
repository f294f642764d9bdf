import pytest
import httpx
import logging
from backend.api.app import app

BASE_URL = "http://test"
API_PATH = "/api/fnvalidacpf"
logger = logging.getLogger("test_valida_cpf")
logging.basicConfig(level=logging.INFO)


@pytest.fixture(autouse=True)
def anonymous_auth(monkeypatch):
    monkeypatch.setenv("AUTH_LEVEL", "anonymous")


def make_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=BASE_URL)


@pytest.mark.asyncio
async def test_get_valid_cpf():
    async with make_client() as client:
        response = await client.get(API_PATH, params={"cpf": "111.444.777-35"})
        logger.info(f"test_get_valid_cpf: status={response.status_code}, body={response.json()}")
        assert response.status_code == 200
        data = response.json()
        assert data["cpf"] == "111.444.777-35"
        assert data["status"] == "valido"
        assert data["message"] == "CPF 111.444.777-35 é válido."
        assert "débitos" not in data["message"]


@pytest.mark.asyncio
async def test_get_invalid_cpf():
    async with make_client() as client:
        response = await client.get(API_PATH, params={"cpf": "11144477736"})
        logger.info(f"test_get_invalid_cpf: status={response.status_code}, body={response.json()}")
        assert response.status_code == 400
        assert response.json()["detail"] == "CPF inválido."


@pytest.mark.asyncio
async def test_get_without_cpf():
    async with make_client() as client:
        response = await client.get(API_PATH)
        assert response.status_code == 400
        assert "forneça um CPF" in response.json()["detail"]


@pytest.mark.asyncio
async def test_post_json_body():
    async with make_client() as client:
        response = await client.post(API_PATH, json={"cpf": " 09702414458 "})
        logger.info(f"test_post_json_body: status={response.status_code}, body={response.json()}")
        assert response.status_code == 200
        assert response.json()["cpf"] == "09702414458"


@pytest.mark.asyncio
async def test_post_query_takes_precedence_over_body():
    async with make_client() as client:
        response = await client.post(API_PATH, params={"cpf": "11144477735"}, json={"cpf": "11144477736"})
        assert response.status_code == 200
        assert response.json()["cpf"] == "11144477735"


@pytest.mark.asyncio
async def test_post_blank_query_falls_back_to_body():
    async with make_client() as client:
        response = await client.post(API_PATH, params={"cpf": "  "}, json={"cpf": "11144477735"})
        assert response.status_code == 200


@pytest.mark.asyncio
async def test_post_invalid_json():
    async with make_client() as client:
        response = await client.post(API_PATH, content=b"{cpf: 111", headers={"content-type": "application/json"})
        logger.info(f"test_post_invalid_json: status={response.status_code}, body={response.json()}")
        assert response.status_code == 400
        assert response.json()["detail"].startswith("JSON inválido")


@pytest.mark.asyncio
async def test_post_json_not_object():
    async with make_client() as client:
        response = await client.post(API_PATH, json=["11144477735"])
        assert response.status_code == 400
        assert response.json()["detail"].startswith("JSON inválido")


@pytest.mark.asyncio
async def test_post_cpf_not_string():
    async with make_client() as client:
        response = await client.post(API_PATH, json={"cpf": 11144477735})
        assert response.status_code == 400
        assert response.json()["detail"] == "O campo cpf deve ser uma string."


@pytest.mark.asyncio
async def test_post_without_cpf_field():
    async with make_client() as client:
        response = await client.post(API_PATH, json={"nome": "Fulano"})
        assert response.status_code == 400
        assert "forneça um CPF" in response.json()["detail"]


@pytest.mark.asyncio
async def test_post_empty_body():
    async with make_client() as client:
        response = await client.post(API_PATH)
        assert response.status_code == 400
        assert "forneça um CPF" in response.json()["detail"]


@pytest.mark.asyncio
async def test_get_ignores_body():
    async with make_client() as client:
        response = await client.request("GET", API_PATH, json={"cpf": "11144477735"})
        assert response.status_code == 400
        assert "forneça um CPF" in response.json()["detail"]


@pytest.mark.asyncio
async def test_method_not_allowed():
    async with make_client() as client:
        response = await client.put(API_PATH, json={"cpf": "11144477735"})
        assert response.status_code == 405


@pytest.mark.asyncio
async def test_post_deeply_nested_json():
    async with make_client() as client:
        body = b"[" * 100000 + b"]" * 100000
        response = await client.post(API_PATH, content=body, headers={"content-type": "application/json"})
        logger.info(f"test_post_deeply_nested_json: status={response.status_code}")
        assert response.status_code == 400
        assert response.json()["detail"].startswith("JSON inválido")
