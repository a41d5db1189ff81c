import json
import logging

import requests
from django.core.management.base import BaseCommand, CommandError

from solidprofile.exceptions import ProfileResolutionError
from solidprofile.profiles import ProfileResolver

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Resolve WebID profiles and print them as JSON"

    def add_arguments(self, parser):
        parser.add_argument("web_ids", type=str, nargs="+", help="WebIDs")
        parser.add_argument("--accept", type=str, default=None, help="Media type to request")

    def handle(self, *args, **options):
        failed = []

        with ProfileResolver() as resolver:
            for web_id in options["web_ids"]:
                logger.info(f"Resolving: {web_id}")
                try:
                    profile = resolver.resolve(web_id, accept=options["accept"])
                except (ProfileResolutionError, requests.RequestException):
                    logger.exception(f"failed to resolve {web_id}")
                    failed.append(web_id)
                    continue

                self.stdout.write(json.dumps(profile.as_dict(), indent=2))

        if failed:
            raise CommandError(f"Could not resolve: {', '.join(failed)}")
