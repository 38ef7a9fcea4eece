import os
import json
import logging
import sys
import argparse

from core.config_loader import load_config
from core.app_context import AppContext
from core.exceptions import MatchingError
from web.backend.services.matching_service import MatchingService
from web.backend.exceptions import ServiceException

logger = logging.getLogger(__name__)


def _print_json(response):
    print(json.dumps(response.model_dump(by_alias=True), indent=2, default=str))


def run_command(args, service: MatchingService):
    if args.command == 'events':
        _print_json(service.get_matching_events(args.volunteer, args.limit))
    elif args.command == 'volunteers':
        _print_json(service.get_matching_volunteers(args.event, args.limit))
    elif args.command == 'alerts':
        _print_json(service.get_urgent_alerts())
    elif args.command == 'stats':
        _print_json(service.get_stats())
    elif args.command == 'score':
        _print_json(service.calculate_score(args.volunteer, args.event))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Volunteer Match Driver")
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to the YAML config file (default: config.yaml)')
    parser.add_argument('--records', type=str, default=None,
                        help='Override the records file from the config')

    commands = parser.add_subparsers(dest='command', required=True)

    events = commands.add_parser('events', help='Rank open events for a volunteer')
    events.add_argument('--volunteer', required=True, help='Volunteer ID')
    events.add_argument('--limit', type=int, default=None, help='Maximum events to return')

    volunteers = commands.add_parser('volunteers', help='Rank active volunteers for an event')
    volunteers.add_argument('--event', required=True, help='Event ID')
    volunteers.add_argument('--limit', type=int, default=None, help='Maximum volunteers to return')

    commands.add_parser('alerts', help='List urgent under-staffed events')
    commands.add_parser('stats', help='Show matching statistics')

    score = commands.add_parser('score', help='Score one volunteer against one event')
    score.add_argument('--volunteer', required=True, help='Volunteer ID')
    score.add_argument('--event', required=True, help='Event ID')

    commands.add_parser('serve', help='Run the web API')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.records:
        config.data.records_file = args.records

    # Configure logging (stderr, so stdout stays valid JSON)
    logging.basicConfig(
        level=config.logging.level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.command == 'serve':
        # The web app loads its own config; hand it the same sources
        os.environ["VOLUNTEER_MATCH_CONFIG"] = os.path.abspath(args.config)
        if args.records:
            os.environ["VOLUNTEER_MATCH_RECORDS"] = os.path.abspath(args.records)
        from web.backend.app import main as serve
        serve()
        return 0

    logger.info(f"Volunteer match driver running '{args.command}'")
    try:
        context = AppContext.build(config)
        run_command(args, MatchingService(context))
    except (ServiceException, MatchingError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
