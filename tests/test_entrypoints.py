"""Tests for the per-service uvicorn entry points."""
from unittest.mock import patch

import pytest

import basket_service.main
import catalog_service.main
import discount_service.main
import ordering_service.main


@pytest.mark.parametrize(
    "module, app_path, port",
    [
        (catalog_service.main, "catalog_service.main:app", 8000),
        (basket_service.main, "basket_service.main:app", 8001),
        (discount_service.main, "discount_service.main:app", 8002),
        (ordering_service.main, "ordering_service.main:app", 8003),
    ],
)
def test_run_starts_uvicorn_with_default_port(monkeypatch, module, app_path, port):
    for name in ("HOST", "CATALOG_PORT", "BASKET_PORT", "DISCOUNT_PORT", "ORDERING_PORT"):
        monkeypatch.delenv(name, raising=False)

    with patch("uvicorn.run") as run:
        module.run()

    run.assert_called_once_with(app_path, host="0.0.0.0", port=port)


def test_port_comes_from_environment(monkeypatch):
    monkeypatch.setenv("ORDERING_PORT", "9100")
    monkeypatch.setenv("HOST", "127.0.0.1")

    with patch("uvicorn.run") as run:
        ordering_service.main.run()

    run.assert_called_once_with("ordering_service.main:app", host="127.0.0.1", port=9100)
