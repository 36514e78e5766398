"""Command line front end - argument parsing and the list/save flows.

Tests cover:
    - list prints id and display name, exits 1 with the error text on failure
    - save builds the draft from flags and picks POST vs PATCH by --id
    - save with blank names exits 1 without a request
"""

import json

import pytest

from api_bridge import cli
from api_bridge.services.sync_controller import SyncController

from tests.services.fake_transport import FakeTransport


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_parser_save_defaults():
    args = cli.build_parser().parse_args(["save", "--nombre", "Ana"])
    assert args.id == 0
    assert args.sexo == "Hombre"
    assert args.rol == "Estudiante"
    assert args.fecha is None


async def test_run_list_prints_people(settings, capsys):
    body = json.dumps([{"id": 1, "nombre": "Ana", "apellido": "Ruiz"}, {"id": 2}])
    controller = SyncController(FakeTransport([body]), settings)

    assert await cli.run_list(controller) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["1\tAna Ruiz", "2\t—"]


async def test_run_list_failure(settings, capsys):
    controller = SyncController(FakeTransport([None]), settings)
    assert await cli.run_list(controller) == 1
    assert "No se pudo contactar" in capsys.readouterr().err


async def test_run_save_creates(settings):
    transport = FakeTransport(["{}"])
    controller = SyncController(transport, settings)
    args = cli.build_parser().parse_args([
        "save", "--nombre", " Ana ", "--apellido", "Ruiz",
        "--sexo", "mujer", "--rol", "Profesor", "--fecha", "03/05/2001",
    ])

    assert await cli.run_save(controller, args) == 0
    method, _, body = transport.calls[0]
    assert method == "POST"
    assert json.loads(body) == {
        "id_persona": 0, "nombre": "Ana", "apellido": "Ruiz",
        "sexo": "m", "fh_nac": "2001-05-03", "id_rol": 2,
    }


async def test_run_save_updates_with_id(settings):
    transport = FakeTransport(["{}"])
    controller = SyncController(transport, settings)
    args = cli.build_parser().parse_args([
        "save", "--id", "42", "--nombre", "Ana", "--apellido", "Ruiz",
    ])

    assert await cli.run_save(controller, args) == 0
    assert transport.calls[0][0] == "PATCH"
    assert json.loads(transport.calls[0][2])["id_persona"] == 42


async def test_run_save_rejected(settings, capsys):
    transport = FakeTransport()
    controller = SyncController(transport, settings)
    args = cli.build_parser().parse_args(["save", "--nombre", "Ana"])

    assert await cli.run_save(controller, args) == 1
    assert transport.calls == []
    assert "obligatorios" in capsys.readouterr().err
