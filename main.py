import argparse
import json
import logging
import sys
from dataclasses import asdict

from core.config_loader import load_config, TeamMatchingConfig
from core.matching import TeamMatchingService
from core.matching.exceptions import ServiceException
from database.database import get_engine, get_session_factory, init_db
from database.uow import matching_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hackathon team matching")
    parser.add_argument("--config", default="config.yaml", help="Path to config YAML")

    subparsers = parser.add_subparsers(dest="command", required=True)

    teams = subparsers.add_parser("teams", help="Recommend teams for a user")
    teams.add_argument("--user", required=True)
    teams.add_argument("--hackathon", required=True)
    teams.add_argument("--limit", type=int, default=None)

    users = subparsers.add_parser("users", help="Recommend users for a team")
    users.add_argument("--team", required=True)
    users.add_argument("--hackathon", required=True)
    users.add_argument("--limit", type=int, default=None)

    match = subparsers.add_parser("match", help="Score one user against one team")
    match.add_argument("--user", required=True)
    match.add_argument("--team", required=True)
    match.add_argument("--hackathon", required=True)

    subparsers.add_parser("init-db", help="Create missing database tables")

    return parser


def run(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    matching_config = config.matching or TeamMatchingConfig()

    if not matching_config.enabled:
        logger.warning("Team matching is disabled in config")
        return 1

    if args.command == "init-db":
        init_db(get_engine(config.database.url))
        logger.info("Database tables created")
        return 0

    session_factory = get_session_factory(config.database.url)

    with matching_uow(session_factory) as repo:
        service = TeamMatchingService(repo, matching_config)

        if args.command == "teams":
            items = service.recommend_teams_for_user(args.user, args.hackathon, args.limit)
            output = [item.to_dict() for item in items]
        elif args.command == "users":
            items = service.recommend_users_for_team(args.team, args.hackathon, args.limit)
            output = [item.to_dict() for item in items]
        else:
            output = asdict(service.calculate_user_team_match(args.user, args.team, args.hackathon))

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except ServiceException as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
