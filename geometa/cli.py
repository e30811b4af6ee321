# ==============================================
# CLI: Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Command-line access to the catalog, using the storage backend
#   named in the configuration (.env / environment).
#
# COMMANDS:
# ---------
#   python -m geometa.cli countries
#   python -m geometa.cli search afr
#   python -m geometa.cli add-country "Kenya" --region Africa --id ke
#   python -m geometa.cli metas bw
#   python -m geometa.cli add-meta bw --title "Okavango" --type nature \
#       --images "a.png, b.png" --tags "delta, wildlife"
#   python -m geometa.cli update-meta bw 3 --title "Okavango Delta"
#   python -m geometa.cli delete-meta bw 3 [--yes]
#   python -m geometa.cli add-sub-meta bw 3 --title "Maun" --type city
#   python -m geometa.cli sub-metas bw
#   python -m geometa.cli stats
#   python -m geometa.cli export out/geometa.json
#   python -m geometa.cli render bw
#   python -m geometa.cli reset --confirm
#
# EXIT STATUS:
# ------------
#   0 on success, 1 when a country/meta is not found, a delete is
#   declined (or cannot be asked), a country id already exists, or
#   a new country has no usable name or id.
#
# ==============================================

import argparse
import sys
from typing import List, Optional

from geometa.config import AppConfig, get_config
from geometa.model.records import MetaType
from geometa.normalization.form_fields import MetaForm
from geometa.persistence.slot_storage import open_storage
from geometa.persistence.catalog_store import CatalogStore
from geometa.catalog.results import MutationResult
from geometa.presentation.controller import (
    CatalogController, TABS, STATS, COUNTRY_INFO, METAS, SUB_METAS
)


STAT_LABELS = {
    "total_countries": "Countries",
    "total_metas": "Metas",
    "total_images": "Images",
}


def build_controller(config: AppConfig) -> CatalogController:
    storage = open_storage(config)
    store = CatalogStore(storage, slot_key=config.storage.slot_key)
    controller = CatalogController(store, delay_seconds=config.render.delay_seconds)
    controller.start()
    return controller


def _add_meta_arguments(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument("--title", required=required)
    parser.add_argument(
        "--type", dest="meta_type", required=False,
        default=MetaType.LANDMARK.value if required else None,
        help=f"one of {', '.join(MetaType.values())} (other values accepted)"
    )
    parser.add_argument("--description", default="" if required else None)
    parser.add_argument("--images", default="" if required else None,
                        help="comma-separated image URLs")
    parser.add_argument("--tags", default="" if required else None,
                        help="comma-separated tags")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="geometa", description="GeoMeta catalog editor")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("countries", help="list countries")

    p = sub.add_parser("search", help="search countries by name, id or region")
    p.add_argument("query")

    p = sub.add_parser("add-country", help="add a country")
    p.add_argument("name")
    p.add_argument("--region", default="")
    p.add_argument("--flag")
    p.add_argument("--id", dest="country_id")

    p = sub.add_parser("metas", help="list metas of a country")
    p.add_argument("country")

    p = sub.add_parser("add-meta", help="add a meta to a country")
    p.add_argument("country")
    _add_meta_arguments(p, required=True)

    p = sub.add_parser("update-meta", help="edit a meta; omitted fields are kept")
    p.add_argument("country")
    p.add_argument("meta_id")
    _add_meta_arguments(p, required=False)

    p = sub.add_parser("delete-meta", help="delete a meta")
    p.add_argument("country")
    p.add_argument("meta_id")
    p.add_argument("--yes", action="store_true", help="skip the confirmation prompt")

    p = sub.add_parser("add-sub-meta", help="add a sub-meta to a meta")
    p.add_argument("country")
    p.add_argument("meta_id")
    _add_meta_arguments(p, required=True)

    p = sub.add_parser("sub-metas", help="list sub-metas of a country")
    p.add_argument("country")

    sub.add_parser("stats", help="show catalog totals")

    p = sub.add_parser("export", help="write the catalog snapshot to a JSON file")
    p.add_argument("path")

    p = sub.add_parser("render", help="print the HTML fragments for a country")
    p.add_argument("country")

    p = sub.add_parser("reset", help="delete the snapshot (defaults are seeded next run)")
    p.add_argument("--confirm", action="store_true")

    return parser


def _report(result: MutationResult) -> int:
    if result.applied:
        print(f"✓ {result.message}")
        if result.record is not None and hasattr(result.record, "id"):
            print(f"  id: {result.record.id}")
        return 0
    print(f"✗ {result.message}")
    return 1


def _prompt(question: str) -> bool:
    try:
        answer = input(f"{question} [y/N] ")
    except EOFError:
        # No terminal to answer from; treat as "no"
        print()
        return False
    return answer.strip().lower() in ("y", "yes")


def _print_records(records) -> None:
    if not records:
        print("(none)")
        return
    for record in records:
        extra = f" | images: {len(record.images)} | tags: {', '.join(record.tags)}"
        print(f"[{record.id}] {record.title} ({record.type}){extra}")


def run(args: argparse.Namespace, controller: CatalogController) -> int:
    command = args.command

    if command in ("countries", "search"):
        if command == "search":
            countries = controller.search(args.query)
        else:
            countries = controller.store.countries
        for country in countries:
            print(f"{country.flag} {country.name} ({country.id}) - {country.region} - "
                  f"{len(country.metas)} metas")
        return 0

    if command == "add-country":
        try:
            result = controller.add_country(
                args.name, args.region, flag=args.flag, country_id=args.country_id
            )
        except ValueError as e:
            print(f"✗ {e}")
            return 1
        return _report(result)

    if command == "stats":
        for key, value in controller.countries.stats().to_dict().items():
            label = STAT_LABELS[key] + ":"
            print(f"{label:<10} {value}")
        return 0

    if command == "export":
        path = controller.export_data(args.path)
        print(f"✓ Exported catalog to {path}")
        return 0

    if command == "reset":
        if not args.confirm:
            print("✗ Refusing to reset without --confirm")
            return 1
        controller.store.clear()
        return 0

    # Everything below works on one country
    if not controller.select_country(args.country):
        print(f"✗ Country '{args.country}' not found")
        return 1

    if command == "metas":
        _print_records(controller.metas.list_metas(args.country))
        return 0

    if command == "sub-metas":
        _print_records(controller.metas.list_sub_metas(args.country))
        return 0

    if command == "add-meta":
        form = MetaForm(args.title, args.meta_type, args.description, args.images, args.tags)
        return _report(controller.submit_meta(form))

    if command == "add-sub-meta":
        form = MetaForm(args.title, args.meta_type, args.description, args.images, args.tags)
        return _report(controller.submit_sub_meta(args.meta_id, form))

    if command == "update-meta":
        form = controller.begin_edit(args.country, args.meta_id)
        if form is None:
            print(f"✗ Meta '{args.meta_id}' not found in '{args.country}'")
            return 1
        for name, value in (("title", args.title), ("type", args.meta_type),
                            ("description", args.description), ("images", args.images),
                            ("tags", args.tags)):
            if value is not None:
                setattr(form, name, value)
        return _report(controller.submit_edit(form))

    if command == "delete-meta":
        confirm = (lambda _question: True) if args.yes else _prompt
        result = controller.delete_meta(args.country, args.meta_id, confirm)
        return _report(result)

    if command == "render":
        controller.flush_renders()
        for target in (TABS, STATS, COUNTRY_INFO, METAS, SUB_METAS):
            print(f"<!-- {target} -->")
            print(controller.output.get(target, ""))
        return 0

    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[List[str]] = None, config: Optional[AppConfig] = None) -> int:
    args = build_parser().parse_args(argv)
    controller = build_controller(config or get_config())
    try:
        return run(args, controller)
    finally:
        controller.store.storage.close()


if __name__ == "__main__":
    sys.exit(main())
