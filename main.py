import sys
import json
import logging
import argparse

from core.config_loader import load_config
from core.scorer import CopyScoringService, ScoreInput

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ASO Copilot copy scorer")
    parser.add_argument('--app-name', type=str, help='App display name')
    parser.add_argument('--category', type=str, default='', help='App Store category, e.g. Productivity')
    parser.add_argument('--caption', action='append', default=[], dest='captions',
                        help='Screenshot caption or filename (repeat once per screenshot)')
    parser.add_argument('--config', type=str, default=None, help='Path to config.yaml')
    parser.add_argument('--serve', action='store_true', help='Start the HTTP API instead of scoring')
    parser.add_argument('--verbose', action='store_true', help='Log per-dimension scoring details')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.serve:
        from web.backend.app import main as serve
        serve()
        return 0

    if not args.app_name:
        parser.error("--app-name is required unless --serve is given")

    config = load_config(args.config)
    if len(args.captions) != 6:
        # The engine scores any number of captions; the API contract expects six
        logger.warning(f"Expected 6 captions, got {len(args.captions)}")

    service = CopyScoringService(config.scorer)
    result = service.score(ScoreInput(
        app_name=args.app_name,
        category=args.category,
        captions=tuple(args.captions)
    ))

    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
