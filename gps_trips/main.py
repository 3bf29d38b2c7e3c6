import argparse
import logging
from typing import List, Optional

from .config import (
    INPUT_FILE,
    MAX_GAP_MINUTES,
    MAX_JUMP_KM,
    OUTPUT_FILE,
    REJECTS_FILE,
)
from .csv_reader import read_gps_records
from .errors import InputFormatError
from .pipeline import format_trip_summary, process_records
from .visualization import create_trip_map
from .writers import write_geojson, write_rejects_log


def _setup_logging() -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=logging.INFO,
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Split raw GPS fixes into trips and export them as GeoJSON"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=INPUT_FILE,
        help=f"CSV file with device_id, lat, lon, timestamp (default: {INPUT_FILE})",
    )
    parser.add_argument(
        "--output",
        default=OUTPUT_FILE,
        help=f"GeoJSON output path (default: {OUTPUT_FILE})",
    )
    parser.add_argument(
        "--rejects",
        default=REJECTS_FILE,
        help=f"Reject log path (default: {REJECTS_FILE})",
    )
    parser.add_argument(
        "--map",
        dest="map_html",
        help="Also write an interactive HTML map of the trips to this path",
    )
    parser.add_argument(
        "--max-gap-minutes",
        type=float,
        default=MAX_GAP_MINUTES,
        help=f"Start a new trip after a longer pause (default: {MAX_GAP_MINUTES})",
    )
    parser.add_argument(
        "--max-jump-km",
        type=float,
        default=MAX_JUMP_KM,
        help=f"Start a new trip after a longer jump (default: {MAX_JUMP_KM})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    _setup_logging()

    logging.info("Processing GPS data from %s ...", args.input)
    try:
        records = read_gps_records(args.input)
    except (InputFormatError, FileNotFoundError) as exc:
        logging.error("Failed to load input file '%s': %s", args.input, exc)
        return 1
    logging.info("Read %d rows from %s", len(records), args.input)

    result = process_records(
        records,
        max_gap_minutes=args.max_gap_minutes,
        max_jump_km=args.max_jump_km,
    )
    for trip in result.trips:
        logging.info(format_trip_summary(trip, result.stats[trip.id]))

    output_path = write_geojson(args.output, result.collection)
    logging.info(
        "Generated %s (%d features)", output_path, result.feature_count
    )

    if args.map_html:
        if result.feature_count:
            create_trip_map(result.collection, output_html_path=args.map_html)
            logging.info("Map preview saved to %s", args.map_html)
        else:
            logging.warning("No multi-point trips; skipping map preview")

    if write_rejects_log(args.rejects, result.rejects):
        logging.info(
            "Rejected %d invalid rows. See %s for details.",
            len(result.rejects),
            args.rejects,
        )

    logging.info("Processing complete")
    return 0
