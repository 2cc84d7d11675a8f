from typing import Any
from unittest import mock

import httpx
import pytest
import respx

from vespa_deploy.client import Client
from vespa_deploy.client.models import ConfigServer


def test_client_init_default() -> None:
    c = Client()
    assert c.target == "local"
    assert c.disable_ssl is False
    assert c.timeout == 120.0
    assert c.deploy_target.url == "http://127.0.0.1:19071"


def test_client_init_settings() -> None:
    c = Client(target="http://target:19071", timeout=5)
    assert c.deploy_target.url == "http://target:19071"
    assert c.timeout == 5.0


def test_client_settings_from_env(monkeypatch: Any) -> None:
    monkeypatch.setenv("VESPA_TARGET", "http://from-env:19071")
    monkeypatch.setenv("VESPA_DISABLE_SSL", "true")
    c = Client()
    assert c.deploy_target.url == "http://from-env:19071"
    assert c.disable_ssl is True


def test_client_attributes() -> None:
    c = Client(target="http://target:19071")
    assert type(c.config_server) is ConfigServer
    assert c.config_server.id == "http://target:19071"
    assert c.config_server.client is c


def test_client_send_injected(client: Client, deploy_service: Any) -> None:
    deploy_service.next_body = "pong"
    r = client.send(httpx.Request("GET", "http://127.0.0.1:19071/ping"))
    assert r.text == "pong"
    assert deploy_service.last_request.url == "http://127.0.0.1:19071/ping"


@respx.mock
def test_client_send_default_transport() -> None:
    route = respx.get("http://127.0.0.1:19071/ping").mock(
        return_value=httpx.Response(204)
    )
    r = Client().send(httpx.Request("GET", "http://127.0.0.1:19071/ping"))
    assert r.status_code == 204
    assert route.called


@pytest.mark.parametrize("disable_ssl,verify", [(True, False), (False, True)])
def test_client_send_default_transport_ssl(disable_ssl: bool, verify: bool) -> None:
    with mock.patch("vespa_deploy.client.base.httpx.Client") as mocked_client:
        c = Client(disable_ssl=disable_ssl, timeout=5.0)
        request = httpx.Request("GET", "https://config.example.com:19071/status.html")
        c.send(request)

    mocked_client.assert_called_once_with(verify=verify, timeout=5.0)
    mocked_client.return_value.__enter__.return_value.send.assert_called_once_with(
        request
    )
