import argparse
import asyncio
import logging
import sys

from markpress.dependencies import get_site_builder
from markpress.exceptions import MarkpressError
from markpress.settings import Settings, settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="markpress", description="Build the static blog from markdown posts"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Render every page into the output dir")
    build.add_argument("--content-dir", type=str, default=None, help="Directory of .md posts")
    build.add_argument("--output-dir", type=str, default=None, help="Where to write the site")
    build.add_argument(
        "--clean", action="store_true", help="Remove the output dir before building"
    )
    return parser.parse_args(argv)


def settings_from_args(args, base: Settings = settings) -> Settings:
    overrides = {}
    if args.content_dir:
        overrides["CONTENT_DIR"] = args.content_dir
    if args.output_dir:
        overrides["OUTPUT_DIR"] = args.output_dir
    return base.model_copy(update=overrides) if overrides else base


def main(argv=None) -> int:
    args = parse_args(argv)
    app_settings = settings_from_args(args)
    configure_logging(app_settings.LOG_LEVEL)

    # Built once here and handed down; nothing below reads settings directly.
    site = app_settings.site_config()
    builder = get_site_builder(app_settings, site)

    try:
        report = asyncio.run(
            builder.build(app_settings.output_path, clean=args.clean)
        )
    except MarkpressError as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        return 1

    logger.info(
        f"Built {len(report.post_slugs)} posts ({len(report.files)} files) "
        f"into {report.output_dir}"
    )
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
