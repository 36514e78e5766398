"""Command line front end - list people or save one record.

Usage:
    api-bridge list
    api-bridge save --nombre Ana --apellido Ruiz [--sexo Mujer] [--fecha 2001-05-03]
                    [--rol Profesor] [--id 42]

Exit codes: 0 on success, 1 on load error, rejection or failed save.
"""

import argparse
import asyncio
import logging
import sys

from api_bridge.config import Settings, get_settings
from api_bridge.core import date_codec
from api_bridge.core.category_maps import ROLE_OPTIONS, SEX_OPTIONS
from api_bridge.core.domain_types import SyncState
from api_bridge.infrastructure.http_transport import HttpTransport
from api_bridge.infrastructure.observability import setup_logging
from api_bridge.schemas.persona import Person
from api_bridge.services.person_form import PersonForm
from api_bridge.services.sync_controller import SyncController

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="api-bridge", description="Personas del servicio escuela",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Lista las personas registradas")

    save = sub.add_parser("save", help="Crea o actualiza una persona")
    save.add_argument("--id", type=int, default=0, help="Id existente (0 = crear)")
    save.add_argument("--nombre", default="")
    save.add_argument("--apellido", default="")
    save.add_argument("--sexo", default=SEX_OPTIONS[0], help=", ".join(SEX_OPTIONS))
    save.add_argument("--fecha", default=None, help="Fecha de nacimiento (yyyy-MM-dd)")
    save.add_argument("--rol", default=ROLE_OPTIONS[0], help=", ".join(ROLE_OPTIONS))
    return parser


async def run_list(controller: SyncController) -> int:
    people = await controller.load()
    if controller.state.load_error_text:
        print(controller.state.load_error_text, file=sys.stderr)
        return 1
    for person in people:
        print(f"{person.id}\t{person.display_name}")
    return 0


async def run_save(controller: SyncController, args: argparse.Namespace) -> int:
    existing = Person(id=args.id) if args.id else None
    form = PersonForm(controller, existing)
    form.draft.first_name = args.nombre
    form.draft.last_name = args.apellido
    form.sex_label = args.sexo
    form.role_label = args.rol
    if args.fecha is not None:
        form.draft.birth_date = date_codec.decode_or_today(args.fecha)

    outcome = await form.submit()
    if outcome is not SyncState.COMPLETED:
        print(form.error_text or outcome.value, file=sys.stderr)
        return 1
    print("Guardado" if not form.is_edit else "Actualizado")
    return 0


async def run(args: argparse.Namespace, settings: Settings) -> int:
    controller = SyncController(HttpTransport.from_settings(settings), settings)
    if args.command == "list":
        return await run_list(controller)
    return await run_save(controller, args)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.debug("Using service at %s", settings.base_url)
    return asyncio.run(run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
