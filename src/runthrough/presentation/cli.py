import argparse
import random
import sys

from src.config import ShuffleConfig
from src.runthrough.adapters.gnupod_repository import GnuPodCatalogRepository
from src.runthrough.application.service import RunthroughService
from src.runthrough.domain.models import CatalogError, InvalidWeightError
from src.runthrough.presentation.formatting import format_track_row
from src.shared.telemetry import Telemetry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="runthrough",
        description=(
            f"Rebuild the '{ShuffleConfig.PLAYLIST_NAME}' playlist of a GNUpod "
            "database, favouring highly rated, rarely and long-ago played tracks."
        ),
    )
    parser.add_argument(
        "database",
        nargs="?",
        default=None,
        help=f"Path to GNUtunesDB.xml (default: ${ShuffleConfig.DB_PATH_ENV} "
        f"or {ShuffleConfig.DEFAULT_DB_PATH})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible order")

    target = parser.add_mutually_exclusive_group()
    target.add_argument("-o", "--output", help="Write the updated database to this file")
    target.add_argument(
        "--in-place", action="store_true", help="Overwrite the database file"
    )
    target.add_argument(
        "--list",
        action="store_true",
        help="Print the shuffled tracks instead of the updated database",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    Telemetry.start_trace()

    database = args.database or ShuffleConfig.db_path()
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        repo = GnuPodCatalogRepository(database)
        tracks = RunthroughService(repo, rng).make_runthrough()

        if args.list:
            for track in tracks:
                print(format_track_row(track))
        elif args.in_place:
            repo.write()
        elif args.output:
            repo.write(args.output)
        else:
            print(repo.dump())
    except (CatalogError, InvalidWeightError) as e:
        print(f"runthrough: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
