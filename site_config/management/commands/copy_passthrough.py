"""
Copy the passthrough asset directories into the output tree.

    python manage.py copy_passthrough [--dry-run]
"""
import logging
import os
import shutil

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from site_config.registry import site

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Copy passthrough asset directories into the output directory unchanged."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="List the copies without performing them.",
        )

    def handle(self, *args, **options):
        try:
            targets = site.passthrough_targets()
        except ImproperlyConfigured as e:
            raise CommandError(str(e))

        copied = 0
        for source, target in targets.items():
            if not os.path.isdir(source):
                logger.warning("Passthrough source %s does not exist, skipping", source)
                continue

            if options["dry_run"]:
                self.stdout.write(f"{source} -> {target}")
                continue

            shutil.copytree(source, target, dirs_exist_ok=True)
            logger.info("Copied %s to %s", source, target)
            copied += 1

        if not options["dry_run"]:
            self.stdout.write(self.style.SUCCESS(f"Copied {copied} passthrough directories"))
