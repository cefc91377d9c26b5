# generate_sitemaps.py

from django.core.management.base import BaseCommand, CommandError

from seo.exceptions import SeoError
from seo.export import write_sitemaps


class Command(BaseCommand):
    help = "Generate sitemap.xml, one sitemap per registered model and the news sitemap"

    def add_arguments(self, parser):
        parser.add_argument(
            "--output-dir",
            default=None,
            help="Directory to write into (defaults to SEO_SITEMAP_OUTPUT_DIR)",
        )

    def handle(self, *args, **options):
        try:
            paths = write_sitemaps(options["output_dir"])
        except SeoError as e:
            raise CommandError(f"Sitemap generation failed: {e}") from e

        for path in paths:
            self.stdout.write(f"  {path}")
        self.stdout.write(
            self.style.SUCCESS(f"Successfully generated {len(paths)} sitemaps")
        )
