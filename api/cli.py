#!/usr/bin/env python3
"""
SailFrisco API CLI Tool.

Command-line interface for operating the service and for quick offline checks:
- Run the API server
- Health check and cache reset against a running server
- Beaufort classification and route ETA without a server

Usage:
    python -m api.cli serve --port 5174
    python -m api.cli check-health
    python -m api.cli clear-cache
    python -m api.cli classify --speed 14.5 --scale log
    python -m api.cli route --waypoints "37.806,-122.4659;37.8591,-122.4853" --vessel 30ft
"""
import argparse
import sys
from typing import List, Optional, Tuple

import requests

from api.config import get_settings


def _base_url(url: Optional[str]) -> str:
    if url:
        return url.rstrip("/")
    settings = get_settings()
    host = "localhost" if settings.api_host in ("0.0.0.0", "") else settings.api_host
    return f"http://{host}:{settings.api_port}"


def serve(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False) -> None:
    """Run the API under uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_level=settings.log_level.lower(),
        reload=reload,
    )


def check_health(url: Optional[str] = None) -> None:
    """Check API health."""
    endpoint = f"{_base_url(url)}/health"
    try:
        response = requests.get(endpoint, timeout=5)
        if response.status_code == 200:
            data = response.json()
            print(f"\nAPI Status: {'ok' if data.get('ok') else 'unknown'}")
            print(f"Service: {data.get('service', 'unknown')}")
            print(f"Version: {data.get('version', 'unknown')}")
            print(f"Cache entries: {data.get('cache_entries', 'unknown')}")
            print(f"Uptime: {data.get('uptime_seconds', 'unknown')} s")
        else:
            print(f"\nAPI returned status code: {response.status_code}")
            sys.exit(1)
    except requests.exceptions.ConnectionError:
        print("\nError: Could not connect to API. Is the server running?")
        sys.exit(1)
    except requests.RequestException as e:
        print(f"\nError: {e}")
        sys.exit(1)


def clear_cache(url: Optional[str] = None) -> None:
    """Drop every cached reading on a running server."""
    endpoint = f"{_base_url(url)}/api/marine/clear-cache"
    try:
        response = requests.post(endpoint, timeout=5)
        response.raise_for_status()
    except requests.RequestException as e:
        print(f"\nError: {e}")
        sys.exit(1)

    print(f"\nCache cleared ({response.json().get('cleared', 0)} entries removed).")


def classify_speed(speed: float, scale: str = "linear") -> None:
    """Print the Beaufort band and gauge position for a wind speed."""
    from src.conditions.beaufort import describe_wind

    wind = describe_wind(speed, scale=scale)
    print(f"\nForce {wind['force']}: {wind['label']}")
    print(f"Waves: {wind['wave_height']}")
    print(f"Gauge ({scale}): {wind['gauge']['speed']:.1f}%")


def parse_waypoints(text: str) -> List[Tuple[float, float]]:
    """Parse ``"lat,lon;lat,lon;..."`` into coordinate pairs."""
    points = []
    for chunk in text.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            lat_text, lon_text = chunk.split(",")
            points.append((float(lat_text), float(lon_text)))
        except ValueError:
            raise argparse.ArgumentTypeError(f"Bad waypoint {chunk!r}, expected 'lat,lon'")
    return points


def route_summary(waypoints: List[Tuple[float, float]], vessel_class: str) -> None:
    """Print distance and hull-speed ETA for a waypoint list."""
    from src.errors import MarineDataError
    from src.routes.planner import RoutePlanner

    try:
        planner = RoutePlanner(waypoints)
        eta = planner.eta_hours(vessel_class)
    except MarineDataError as e:
        print(f"\nError: {e.message}")
        sys.exit(1)

    print(f"\nWaypoints: {len(planner)}")
    print(f"Distance: {planner.total_distance_nm():.2f} nm")
    if eta is None:
        print("ETA: n/a (need at least two waypoints)")
    else:
        print(f"ETA ({vessel_class}): {eta:.2f} h")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="SailFrisco API CLI Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Run the server:
    python -m api.cli serve --port 5174

  Check API health:
    python -m api.cli check-health --url http://localhost:5174

  Classify a wind speed:
    python -m api.cli classify --speed 18

  Sausalito to Berkeley in a 30 footer:
    python -m api.cli route --waypoints "37.8591,-122.4853;37.8659,-122.3114"
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", help="Bind address (default: API_HOST)")
    serve_parser.add_argument("--port", type=int, help="Port (default: API_PORT)")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    # check-health
    health_parser = subparsers.add_parser("check-health", help="Check API health")
    health_parser.add_argument("--url", help="Server base URL")

    # clear-cache
    clear_parser = subparsers.add_parser("clear-cache", help="Clear the server's response cache")
    clear_parser.add_argument("--url", help="Server base URL")

    # classify
    classify_parser = subparsers.add_parser("classify", help="Beaufort force for a wind speed")
    classify_parser.add_argument("--speed", type=float, required=True, help="Wind speed in knots")
    classify_parser.add_argument("--scale", choices=["linear", "log"], default="linear")

    # route
    route_parser = subparsers.add_parser("route", help="Distance and ETA for waypoints")
    route_parser.add_argument(
        "--waypoints",
        type=parse_waypoints,
        required=True,
        help='Semicolon separated "lat,lon" pairs'
    )
    route_parser.add_argument("--vessel", default="30ft", help="Vessel class (default: 30ft)")

    args = parser.parse_args(argv)

    if args.command == "serve":
        serve(args.host, args.port, args.reload)
    elif args.command == "check-health":
        check_health(args.url)
    elif args.command == "clear-cache":
        clear_cache(args.url)
    elif args.command == "classify":
        classify_speed(args.speed, args.scale)
    elif args.command == "route":
        route_summary(args.waypoints, args.vessel)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
