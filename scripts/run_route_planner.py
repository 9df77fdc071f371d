import argparse
import logging

import logging_config
from dashboard.controller import DashboardController
from dashboard.formatting import format_distance, format_duration, format_fare
from dashboard.state import MapSession
from locations.catalog import load_catalog
from routing.geolocation import IPGeolocationClient
from routing.models import TransportMode
from routing.osrm_client import OSRMClient
from routing.route_service import RouteEstimator

log = logging.getLogger("scripts.run_route_planner")


def main():
    parser = argparse.ArgumentParser(description="Estimate routes to a location for every transport mode.")
    parser.add_argument("destination", help="location id from sampledata/locations.csv")
    parser.add_argument("--from", dest="origin", nargs=2, type=float, metavar=("LAT", "LON"),
                        help="start position (defaults to IP geolocation)")
    parser.add_argument("--safety", action="store_true", help="enable safety mode")
    parser.add_argument("--data-dir", default=None)
    args = parser.parse_args()

    logging_config.configure()

    session = MapSession(catalog=load_catalog(args.data_dir))
    controller = DashboardController(
        session,
        RouteEstimator(OSRMClient(profile="driving", timeout=10)),
        ip_client=IPGeolocationClient(),
    )

    if args.origin:
        session.set_user_location(tuple(args.origin))
    elif controller.locate_user() is None:
        log.error("Could not determine a start position, pass --from LAT LON")
        return

    session.set_route_destination(args.destination)
    session.set_safety_mode(args.safety)
    destination = session.route_destination()
    print(f"\nRoute to {destination.name} ({destination.address}), safety mode {'on' if args.safety else 'off'}\n")

    for mode in TransportMode:
        estimate = controller.change_transport_mode(mode)
        if estimate is None:
            print(f"{mode.value}: no route")
            continue
        for index, route in enumerate(estimate.alternatives):
            label = "primary" if index == 0 else f"alt {index}"
            print(
                f"{mode.value:<9} {label:<8} "
                f"{format_duration(route.duration_s):>8} | {format_distance(route.distance_m):>8} | "
                f"{format_fare(route.cost):>6} | safety {route.safety_score}"
            )


if __name__ == "__main__":
    main()
