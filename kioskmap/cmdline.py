import argparse
import json
import logging
import sys

from kioskmap import directory
from kioskmap.domain import MapNavigator
from kioskmap.helpers import fit, to_insets, to_view_size
from kioskmap.utils import parse_pair, performance_logging


def _view_arg(value: str):
    try:
        return parse_pair(value.lower(), "x")
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def run_fit(argv=sys.argv[1:]):
    parser = argparse.ArgumentParser(
        description="Compute the map transform that shows two points in a viewport"
    )
    # nargs keeps negative coordinates like `--from -100 -200` working
    parser.add_argument(
        "--from",
        dest="from_",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        help="First point",
    )
    parser.add_argument(
        "--to", nargs=2, type=float, metavar=("X", "Y"), help="Second point"
    )
    parser.add_argument(
        "--view",
        type=_view_arg,
        required=True,
        help="Viewport size, as WIDTHxHEIGHT",
    )
    parser.add_argument(
        "--padding", type=float, help="Margin around the points"
    )
    parser.add_argument("--max-scale", type=float, help="Zoom cap")
    parser.add_argument(
        "--insets",
        nargs=4,
        type=float,
        metavar=("TOP", "RIGHT", "BOTTOM", "LEFT"),
        help="Viewport area covered by UI",
    )
    parser.add_argument("--kiosk", help="Kiosk JSON file")
    parser.add_argument("--floor-plans", help="Floor plans JSON file")
    parser.add_argument("--places", help="Places JSON file")
    parser.add_argument(
        "--place", help="Id of the place to fit together with the kiosk"
    )

    logger = logging.getLogger("run_fit")
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    opts = parser.parse_args(argv)

    directory_mode = any(
        [opts.kiosk, opts.floor_plans, opts.places, opts.place]
    )
    if directory_mode:
        if not all([opts.kiosk, opts.floor_plans, opts.places, opts.place]):
            parser.error(
                "--kiosk, --floor-plans, --places and --place must be used together"
            )

        with performance_logging("load directory", logger=logger):
            kiosk_directory = directory.load(
                kiosk_data=opts.kiosk,
                floor_plans_data=opts.floor_plans,
                places_data=opts.places,
            )

        place = kiosk_directory.get_place(opts.place)
        if place is None:
            parser.error(f"Unknown place '{opts.place}'")

        navigator = MapNavigator(
            kiosk_directory,
            view_size=to_view_size(opts.view),
            insets=to_insets(opts.insets) if opts.insets else None,
            padding=opts.padding,
            max_scale=opts.max_scale,
        )
        transform = navigator.show_on_map(place)
        logger.info(
            f"Fitted {kiosk_directory.kiosk} and {place} on floor {navigator.current_floor_plan}"
        )
    else:
        if opts.from_ is None or opts.to is None:
            parser.error("--from and --to are required")

        transform = fit(
            opts.from_,
            opts.to,
            opts.view,
            padding=opts.padding,
            max_scale=opts.max_scale,
            insets=opts.insets,
        )

    print(json.dumps(transform.to_dict()))
