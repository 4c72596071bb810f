import sys
import json
import logging
import argparse
from typing import List, Optional

from ebi.config_loader import load_config
from ebi.exceptions import InvalidScoreRequestError, ScoringServiceError
from ebi.scorer import ScoringService, ScoreRequest
from ebi.scorer.models import SUBJECT_TYPES

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_score(args: argparse.Namespace) -> int:
    """Score one subject and print the report as JSON."""
    config = load_config(args.config)
    service = ScoringService.from_config(config)
    request = ScoreRequest.from_raw(args.subject, args.type, args.notes)

    try:
        report = service.score(request)
    except InvalidScoreRequestError as e:
        logger.error(str(e))
        return 2
    except ScoringServiceError as e:
        logger.error(f"{e}: {e.detail}")
        return 1

    print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    return 0


def run_serve(args: argparse.Namespace) -> int:
    """Start the web server."""
    from web.backend.app import main as serve
    serve()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Explorer Bridge Index")
    subparsers = parser.add_subparsers(dest='command', required=True)

    score = subparsers.add_parser('score', help='Score a person, event or idea')
    score.add_argument('subject', type=str, help='Subject to score')
    score.add_argument('--type', type=str, choices=list(SUBJECT_TYPES), default='person',
                       help='Subject type: person (default), event, or idea')
    score.add_argument('--notes', type=str, default='',
                       help='Free-text context; include #explorer for Explorer Mode')
    score.add_argument('--config', type=str, default='config.yaml',
                       help='Path to config.yaml')
    score.set_defaults(func=run_score)

    serve = subparsers.add_parser('serve', help='Run the web server')
    serve.set_defaults(func=run_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
