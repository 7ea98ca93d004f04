"""Application entry point: one generation run, or a cron-scheduled loop."""

from __future__ import annotations

import json
import logging
import sys

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from sitemapgen.config import Config, load_config
from sitemapgen.jobs import run_generation

logger = logging.getLogger("sitemapgen")


def _setup_logging(log_level: str, log_format: str) -> None:
    """Configure root logger based on config."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format == "json":
        formatter = logging.Formatter(
            json.dumps(
                {
                    "time": "%(asctime)s",
                    "level": "%(levelname)s",
                    "logger": "%(name)s",
                    "message": "%(message)s",
                }
            )
        )
    else:
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def _run_scheduled(config: Config) -> None:
    """Run generation, logging failures so the scheduler keeps going."""
    try:
        run_generation(config)
    except Exception:
        logger.exception("Scheduled generation failed; scheduler will continue")


def _build_scheduler(config: Config) -> BlockingScheduler:
    """Create a BlockingScheduler running generation on ``config.schedule_cron``."""
    minute, hour, day, month, day_of_week = config.schedule_cron.split()
    scheduler = BlockingScheduler()
    scheduler.add_job(
        _run_scheduled,
        trigger=CronTrigger(
            minute=minute,
            hour=hour,
            day=day,
            month=month,
            day_of_week=day_of_week,
        ),
        args=[config],
        id="generation",
        name="Sitemap generation",
    )
    return scheduler


def main() -> int:
    """Load config, set up logging, and run generation once or on a schedule."""
    try:
        config = load_config()
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    _setup_logging(config.log_level, config.log_format)

    logger.info(
        "Sitemap generation starting (domain=%s, output=%s, style=%s)",
        config.domain,
        config.output_path,
        config.index_style,
    )

    if not config.schedule_cron:
        try:
            run_generation(config)
        except Exception:
            logger.exception("Generation failed")
            return 1
        return 0

    scheduler = _build_scheduler(config)
    _run_scheduled(config)
    logger.info("Scheduler starting (cron=%s)", config.schedule_cron)
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Scheduler shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
