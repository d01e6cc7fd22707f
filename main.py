#!/usr/bin/env python3
"""
geomprobe - Ray, line and shape intersection testing

Main entry point for evaluating probe files.
"""

import argparse
import logging
import sys

from geomprobe.vec3 import Vec3, Point3
from geomprobe.ray import Ray
from geomprobe.line import Line
from geomprobe.shapes import Sphere, ShapeGroup
from geomprobe.probe_parser import ProbeSet, ProbeParseError, Query, load_probes
from geomprobe.logging_config import setup_logging

logger = logging.getLogger("geomprobe.main")


def create_demo_probes() -> ProbeSet:
    """Create a demo probe set covering hits, misses and tangents."""
    unit = Sphere(Point3(0, 0, 0), 1.0)
    offset = Sphere(Point3(10, 0, 0), 5.0)
    both = ShapeGroup([unit, offset])

    probes = ProbeSet(shapes={'unit': unit, 'offset': offset, 'both': both})
    queries = [
        Query('center-contained', 'point', unit, Point3(0, 0, 0)),
        Query('outside-point', 'point', unit, Point3(1.1, 0, 0)),
        Query('head-on', 'ray', unit, Ray(Point3(0, 0, -5), Vec3(0, 0, 1))),
        Query('from-inside', 'ray', unit, Ray(Point3(0, 0, 0), Vec3(1, 0, 0))),
        Query('orthogonal-miss', 'ray', offset, Ray(Point3(1, 0, 0), Vec3(0, 1, 0))),
        Query('wrong-direction', 'ray', offset, Ray(Point3(0, 0, 0), Vec3(-1, 0, 0))),
        Query('grazing', 'ray', offset, Ray(Point3(0, 5, 0), Vec3(1, 0, 0))),
        Query('tangent-line', 'line', unit, Line(Point3(-20, 1, 0), Point3(-10, 1, 0))),
        Query('missing-line', 'line', unit, Line(Point3(-20, 1.1, 0), Point3(-10, 1.1, 0))),
        Query('nearest-of-group', 'ray', both, Ray(Point3(-5, 0, 0), Vec3(1, 0, 0))),
    ]
    probes.queries.extend(queries)
    return probes


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='geomprobe - Ray, line and shape intersection testing',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py probes.yaml
  python main.py probes.json --log-level DEBUG
  python main.py --demo
        '''
    )

    parser.add_argument('probe_file', nargs='?', help='Probe file to evaluate (YAML or JSON)')
    parser.add_argument('--demo', action='store_true', help='Evaluate the built-in demo probes')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')
    parser.add_argument('--log-file', type=str, default=None, help='Also write logs to this file')

    args = parser.parse_args(argv)

    if not args.demo and args.probe_file is None:
        parser.error('a probe file is required unless --demo is given')

    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.demo:
        probes = create_demo_probes()
    else:
        try:
            probes = load_probes(args.probe_file)
        except ProbeParseError as e:
            logger.error("Failed to load %s: %s", args.probe_file, e)
            print(f"error: {e}", file=sys.stderr)
            return 1

    logger.info("Evaluating %d queries against %d shapes", len(probes.queries), len(probes.shapes))

    results = probes.evaluate()
    for result in results:
        print(result.describe())

    hits = sum(1 for result in results if result.hit)
    logger.info("%d of %d queries hit", hits, len(results))
    return 0


if __name__ == '__main__':
    sys.exit(main())
