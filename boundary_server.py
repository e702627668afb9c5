#!/usr/bin/env python
"""
ZipBoundary Server
==================
REST API and command-line entry point for computing region boundaries.

Endpoints:
    POST /process-zipcodes - Union of the area files for a list of zipcodes
    POST /create-boundary - Convex hull of a list of [lon, lat] points
    GET /api/health - Health check

Usage:
    Server: python boundary_server.py serve
    One-off: python boundary_server.py zipcodes 10001 10002
             python boundary_server.py points points.json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from boundary import GeometryError, ValidationError, hull_boundary, merge_boundary
from boundary.smoothing import validate_smoothing_distance
from config.config_loader import load_boundary_settings, load_config
from core.feature_loader import load_feature_collections, validate_zipcodes
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

SERVICE_NAME = 'zipboundary'
INTERNAL_ERROR = {'error': 'Internal server error'}


def _client_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={'error': message})


def _server_error() -> JSONResponse:
    return JSONResponse(status_code=500, content=INTERNAL_ERROR)


async def _read_json_body(request: Request) -> Optional[Dict]:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return body if isinstance(body, dict) else None


def create_app(settings: Optional[Dict] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Boundary settings (see config.config_loader.load_boundary_settings);
                  loaded from the configuration file when omitted
    """
    if settings is None:
        settings = load_boundary_settings(load_config())

    geojson_directory = Path(settings['geojson_directory'])
    max_zipcodes = settings['max_zipcodes']
    smoothing_distance = validate_smoothing_distance(settings.get('smoothing_distance_degrees'))

    def _zipcode_boundary(zipcodes: List[str]):
        # File I/O and the union fold both block; callers run this in a worker thread
        collections = load_feature_collections(geojson_directory, zipcodes)
        return merge_boundary(collections, smoothing_distance=smoothing_distance)

    web_app = FastAPI(title="ZipBoundary API")

    @web_app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": SERVICE_NAME}

    @web_app.post("/process-zipcodes")
    async def process_zipcodes(request: Request):
        """Return the outer boundary of the areas covered by the given zipcodes.

        Body:
            zipcodes: list[str] - Zipcode keys; unknown zipcodes are skipped

        Returns:
            GeoJSON Feature with the unioned Polygon/MultiPolygon, or an empty
            FeatureCollection when none of the zipcodes has an area file
        """
        body = await _read_json_body(request)
        if body is None:
            return _client_error("Invalid input. Expected a JSON object.")

        zipcodes = body.get('zipcodes')
        try:
            zipcodes = validate_zipcodes(zipcodes)
        except ValidationError as e:
            return _client_error(str(e))

        if len(zipcodes) > max_zipcodes:
            return _client_error(f"Too many zip codes: {len(zipcodes)} (maximum {max_zipcodes})")

        try:
            boundary = await asyncio.to_thread(_zipcode_boundary, zipcodes)
        except GeometryError as e:
            logger.error(f"Error processing GeoJSON files: {e} (step={e.step}, index={e.index})")
            return _server_error()
        except Exception as e:
            logger.error(f"Error processing GeoJSON files: {e}", exc_info=True)
            return _server_error()

        return boundary.to_geojson()

    @web_app.post("/create-boundary")
    async def create_boundary(request: Request):
        """Return the convex hull of a set of points.

        Body:
            points: list[[lon, lat]] - At least three coordinate pairs
        """
        body = await _read_json_body(request)
        if body is None:
            return _client_error("Invalid input. Expected a JSON object.")

        points = body.get('points')
        if not isinstance(points, list) or len(points) < 3:
            return _client_error("Invalid input. Expected an array of at least three points.")

        try:
            boundary = await asyncio.to_thread(hull_boundary, points)
        except ValidationError as e:
            return _client_error(str(e))
        except GeometryError as e:
            logger.error(f"Error creating boundary: {e}")
            return _server_error()
        except Exception as e:
            logger.error(f"Error creating boundary: {e}", exc_info=True)
            return _server_error()

        return boundary.to_geojson()

    return web_app


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute region boundaries from zipcodes or points.")
    parser.add_argument('--config', help="Path to configuration JSON (default: config/boundary_config.json)")

    subparsers = parser.add_subparsers(dest='command', required=True)

    serve = subparsers.add_parser('serve', help="Run the HTTP API")
    serve.add_argument('--host', help="Bind address (overrides config)")
    serve.add_argument('--port', type=int, help="Bind port (overrides config)")

    zipcodes = subparsers.add_parser('zipcodes', help="Print the boundary of zipcode areas")
    zipcodes.add_argument('zipcodes', nargs='+')

    points = subparsers.add_parser('points', help="Print the convex hull of a JSON points file")
    points.add_argument('points_file', help="JSON file holding [[lon, lat], ...] or {\"points\": [...]}")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line entry point.

    Returns:
        Process exit code (0 success, 1 geometry/unexpected failure, 2 invalid input)
    """
    args = _build_parser().parse_args(argv)

    settings = load_boundary_settings(load_config(args.config))

    if args.command == 'serve':
        import uvicorn

        setup_logging()
        host = args.host or settings['host']
        port = args.port or settings['port']
        logger.info(f"Server running at http://{host}:{port}")
        uvicorn.run(create_app(settings), host=host, port=port)
        return 0

    # stdout carries the GeoJSON result
    setup_logging(log_to_file=False, stream=sys.stderr)

    try:
        if args.command == 'zipcodes':
            collections = load_feature_collections(settings['geojson_directory'], args.zipcodes)
            result = merge_boundary(collections, settings.get('smoothing_distance_degrees'))
        else:
            with open(args.points_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            points = data.get('points') if isinstance(data, dict) else data
            result = hull_boundary(points)
    except ValidationError as e:
        logger.error(f"✗ Invalid input: {e}")
        return 2
    except GeometryError as e:
        logger.error(f"✗ Geometry error: {e}")
        return 1
    except Exception as e:
        logger.error(f"✗ Boundary computation failed: {e}", exc_info=True)
        return 1

    json.dump(result.to_geojson(), sys.stdout)
    sys.stdout.write('\n')
    return 0


if __name__ == "__main__":
    sys.exit(main())
